import unittest

from keyboard_and_plugboard import ALPHABET, Plugboard
from machine import Machine
from rotor_and_reflector import Reflector, Rotor


def make_machine(numbers=(1, 2, 3), positions=(0, 0, 0), reflector="B", plugs=()):
    rotors = tuple(Rotor.load_wiring(n, p) for n, p in zip(numbers, positions))
    return Machine(rotors, Reflector.load_wiring(reflector), Plugboard(plugs))


class MachineTests(unittest.TestCase):
    def test_historical_vector(self):
        # Wehrmacht I: rotors I-II-III at AAA, UKW-B. The right-hand rotor is
        # the fast one and steps before the key is enciphered, so here it goes
        # first and starts one position on.
        machine = make_machine(numbers=(3, 2, 1), positions=(1, 0, 0))
        self.assertEqual(machine.encrypt("AAAAA"), "BDZGO")

    def test_decrypts_historical_vector(self):
        machine = make_machine(numbers=(3, 2, 1), positions=(1, 0, 0))
        self.assertEqual(machine.decrypt("BDZGO"), "AAAAA")

    def test_full_cycle_of_fast_rotor_carries_once(self):
        machine = make_machine()
        machine.encrypt("A" * 26)
        self.assertEqual(machine.positions, (0, 1, 0))

    def test_middle_rotor_carry_steps_slow_rotor(self):
        # middle rotor II sits one before its notch F (5); fast rotor I one before R (17)
        machine = make_machine(positions=(16, 4, 0))
        machine.encrypt("X")
        self.assertEqual(machine.positions, (17, 5, 1))
        machine.encrypt("X")
        self.assertEqual(machine.positions, (18, 5, 1))

    def test_slow_rotor_never_carries_further(self):
        # slow rotor III steps onto its own notch W (22); nothing else moves
        machine = make_machine(positions=(16, 4, 21))
        machine.encrypt("X")
        self.assertEqual(machine.positions, (17, 5, 22))

    def test_reciprocity_from_same_state(self):
        state = (5, 17, 24)
        machine = make_machine(numbers=(4, 5, 1), reflector="C", plugs=["AQ", "EP"])
        for letter in ALPHABET:
            machine.set_positions(state)
            cipher = machine.encrypt(letter)
            machine.set_positions(state)
            self.assertEqual(machine.encrypt(cipher), letter)
            self.assertNotEqual(cipher, letter)

    def test_message_round_trip(self):
        message = "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG" * 4
        cipher = make_machine(positions=(3, 9, 12), plugs=["AB", "CD"]).encrypt(message)
        plain = make_machine(positions=(3, 9, 12), plugs=["AB", "CD"]).encrypt(cipher)
        self.assertEqual(plain, message)

    def test_invalid_characters_are_dropped(self):
        machine = make_machine()
        out = machine.encrypt("HELLO, WORLD!\n")
        self.assertEqual(len(out), 10)
        self.assertEqual(out, make_machine().encrypt("HELLOWORLD"))

    def test_invalid_characters_do_not_step(self):
        machine = make_machine()
        self.assertEqual(machine.encrypt("hello 123 ,.!\n"), "")
        self.assertEqual(machine.positions, (0, 0, 0))

    def test_state_carries_across_calls(self):
        shared = make_machine(numbers=(3, 2, 1), positions=(1, 0, 0))
        split = shared.encrypt("A") + shared.encrypt("A")

        fresh = make_machine(numbers=(3, 2, 1), positions=(1, 0, 0)).encrypt("A")
        fresh += make_machine(numbers=(3, 2, 1), positions=(1, 0, 0)).encrypt("A")

        self.assertEqual(split, make_machine(numbers=(3, 2, 1), positions=(1, 0, 0)).encrypt("AA"))
        self.assertNotEqual(split, fresh)

    def test_plugboard_applied_on_both_sides(self):
        plugged = make_machine(plugs=["AB", "KZ"])
        plain = make_machine()
        swap = plugged.plugboard.swap
        for letter in ALPHABET:
            self.assertEqual(plugged.encrypt(letter), swap(plain.encrypt(swap(letter))))

    def test_plugboard_swaps_before_rotors(self):
        plugged = make_machine(plugs=["AB"])
        plain = make_machine()
        # with A and B swapped, entering A looks like entering B on a plain machine
        self.assertEqual(plugged.plugboard.swap("A"), "B")
        self.assertEqual(plugged.plugboard.swap("B"), "A")
        self.assertEqual(plugged.encrypt("A"), plugged.plugboard.swap(plain.encrypt("B")))

    def test_empty_message(self):
        self.assertEqual(make_machine().encrypt(""), "")

    def test_set_positions_wraps_into_range(self):
        machine = make_machine()
        machine.set_positions((26, 27, -1))
        self.assertEqual(machine.positions, (0, 1, 25))

    def test_set_positions_validates_length(self):
        with self.assertRaises(ValueError):
            make_machine().set_positions((1, 2))

    def test_needs_three_rotors(self):
        rotors = (Rotor.load_wiring(1), Rotor.load_wiring(2))
        with self.assertRaises(ValueError):
            Machine(rotors, Reflector.load_wiring("B"))


if __name__ == "__main__":
    unittest.main()
