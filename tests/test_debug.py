import unittest

from debug import Debug


class DebugTests(unittest.TestCase):
    def setUp(self):
        self.debug = Debug("ENIGMA.test")
        saved = self.debug.status()
        self.addCleanup(lambda: Debug._components.update(saved))

    def test_components_off_by_default(self):
        self.assertFalse(any(Debug().status().values()))

    def test_enabled_component_logs(self):
        self.debug.enable("stepping")
        with self.assertLogs("ENIGMA.test", level="DEBUG") as cm:
            self.debug.log("stepping", "pos 3")
        self.assertEqual(cm.output, ["DEBUG:ENIGMA.test:[STEPPING] pos 3"])

    def test_switch_is_shared_between_instances(self):
        Debug().enable("rotor")
        self.assertTrue(self.debug.status()["rotor"])
        self.debug.toggle("rotor")
        self.assertFalse(Debug().status()["rotor"])

    def test_unknown_component(self):
        with self.assertRaises(ValueError):
            self.debug.enable("lampboard")

    def test_global_switch_silences_instance(self):
        self.debug.enable("encipher")
        self.debug.toggle_global(False)
        with self.assertNoLogs("ENIGMA.test", level="DEBUG"):
            self.debug.log("encipher", "A->B")


if __name__ == "__main__":
    unittest.main()
