import os, sys, pdb, json, logging, tempfile
import unittest as test
from unittest.mock import patch

from themeview import config
from themeview.utils import BLAB
from themeview.exceptions import ConfigurationException

tmpdir = tempfile.TemporaryDirectory(prefix="_test_config.")

def tearDownModule():
    tmpdir.cleanup()

class TestLoad(test.TestCase):

    def test_load_yaml(self):
        cfgfile = os.path.join(tmpdir.name, "cfg.yml")
        with open(cfgfile, 'w') as fd:
            fd.write("themeview:\n  child_theme: /themes/child\n  content_dir: /wp-content\n")
        cfg = config.load_from_file(cfgfile)
        self.assertEqual(cfg['themeview']['child_theme'], "/themes/child")
        self.assertEqual(config.section(cfg)['content_dir'], "/wp-content")

    def test_load_json(self):
        cfgfile = os.path.join(tmpdir.name, "cfg.json")
        with open(cfgfile, 'w') as fd:
            json.dump({"child_theme": "/themes/child"}, fd)
        cfg = config.load_from_file(cfgfile)
        self.assertEqual(config.section(cfg), {"child_theme": "/themes/child"})

    def test_load_empty(self):
        cfgfile = os.path.join(tmpdir.name, "empty.yml")
        with open(cfgfile, 'w') as fd:
            pass
        self.assertEqual(config.load_from_file(cfgfile), {})

    def test_load_bad(self):
        cfgfile = os.path.join(tmpdir.name, "bad.json")
        with open(cfgfile, 'w') as fd:
            fd.write("{ goob")
        with self.assertRaises(ConfigurationException):
            config.load_from_file(cfgfile)

        cfgfile = os.path.join(tmpdir.name, "list.yml")
        with open(cfgfile, 'w') as fd:
            fd.write("- a\n- b\n")
        with self.assertRaises(ConfigurationException):
            config.load_from_file(cfgfile)

    def test_load_missing(self):
        with self.assertRaises(OSError):
            config.load_from_file(os.path.join(tmpdir.name, "nope.yml"))

class TestMerge(test.TestCase):

    def test_merge(self):
        defs = {"a": 1, "b": {"c": 2, "d": 3}, "e": [1]}
        prim = {"b": {"c": 5}, "f": "x"}
        out = config.merge_config(prim, defs)
        self.assertEqual(out, {"a": 1, "b": {"c": 5, "d": 3}, "e": [1], "f": "x"})
        self.assertEqual(defs["b"]["c"], 2)

class TestLogging(test.TestCase):

    def test_level_for(self):
        self.assertEqual(config.level_for("debug"), logging.DEBUG)
        self.assertEqual(config.level_for("WARN"), logging.WARNING)
        self.assertEqual(config.level_for("BLAB"), BLAB)
        self.assertEqual(config.level_for(15), 15)
        with self.assertRaises(ConfigurationException):
            config.level_for("goob")

    def test_configure_log(self):
        logfile = os.path.join(tmpdir.name, "themeview.log")
        rootlog = logging.getLogger()
        hdlr = config.configure_log(config={"themeview": {"logfile": logfile, "loglevel": "INFO"}})
        try:
            self.assertIn(hdlr, rootlog.handlers)
            self.assertEqual(hdlr.level, logging.INFO)
            logging.getLogger("themeview.test").info("hello log")
            hdlr.flush()
        finally:
            rootlog.removeHandler(hdlr)
            hdlr.close()

        with open(logfile) as fd:
            self.assertIn("themeview.test INFO: hello log", fd.read())

    def test_configure_log_nofile(self):
        with self.assertRaises(ConfigurationException):
            config.configure_log()
        with self.assertRaises(ConfigurationException):
            config.configure_log(os.path.join(tmpdir.name, "nodir", "x.log"))

class TestFindConfig(test.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_unset(self):
        self.assertIsNone(config.find_config_file())

    def test_missing(self):
        with patch.dict(os.environ, {"THEMEVIEW_CONFIG": os.path.join(tmpdir.name, "nope.yml")}):
            with self.assertRaises(ConfigurationException):
                config.find_config_file()


if __name__ == '__main__':
    test.main()
