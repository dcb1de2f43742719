"""
Utilities for loading and applying themeview configuration data.

Configuration is a (possibly nested) dictionary, typically read from a YAML or JSON file.  The
parameters used by this package may appear either at the top level or within a ``themeview``
section:

``child_theme``
     the directory of the active theme (the stylesheet directory); required
``parent_theme``
     the directory of the theme the active theme is based on (the template directory);
     defaults to ``child_theme``
``content_dir``
     the host's content directory; plugins named by a string are assumed to be installed
     under ``{content_dir}/plugins``; required
``logfile``
     a file to send log messages to (see :py:func:`configure_log`)
``loglevel``
     the minimum level of messages to record to ``logfile``
"""
import os, json, logging
from collections.abc import Mapping
from copy import deepcopy

import yaml

from .exceptions import ConfigurationException
from .utils import BLAB

CONFIG_ENV_VAR = "THEMEVIEW_CONFIG"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

_log_levels_byname = {
    "BLAB":     BLAB,
    "DEBUG":    logging.DEBUG,
    "INFO":     logging.INFO,
    "WARN":     logging.WARNING,
    "WARNING":  logging.WARNING,
    "ERROR":    logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

def load_from_file(configfile: str) -> Mapping:
    """
    read the configuration from the given file and return it as a dictionary.  The file is
    parsed as JSON if its name ends in ".json"; otherwise, it is parsed as YAML.

    :raises ConfigurationException:  if the file contents cannot be parsed
    :raises OSError:  if the file cannot be opened or read
    """
    configfile = os.fspath(configfile)
    with open(configfile) as fd:
        try:
            if configfile.endswith('.json'):
                data = json.load(fd)
            else:
                data = yaml.safe_load(fd)
        except (ValueError, yaml.YAMLError) as ex:
            raise ConfigurationException("%s: config parsing error: %s" % (configfile, str(ex))) from ex

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigurationException("%s: config file does not contain a dictionary" % configfile)
    return data

def merge_config(primary: Mapping, defaults: Mapping) -> Mapping:
    """
    merge two configurations, returning a new dictionary.  Values in ``primary`` override those
    in ``defaults``; nested dictionaries are merged recursively.
    """
    out = deepcopy(dict(defaults))
    for key, val in primary.items():
        if isinstance(val, Mapping) and isinstance(out.get(key), Mapping):
            out[key] = merge_config(val, out[key])
        else:
            out[key] = deepcopy(val)
    return out

def section(config: Mapping) -> Mapping:
    """
    return the portion of the given configuration that applies to themeview: the contents of
    the ``themeview`` section if present, otherwise the configuration itself.
    """
    if isinstance(config.get('themeview'), Mapping):
        return config['themeview']
    return config

def level_for(lev) -> int:
    """
    convert a log level given either as an integer or a level name to an integer
    """
    if isinstance(lev, int):
        return lev
    try:
        return _log_levels_byname[str(lev).upper()]
    except KeyError:
        raise ConfigurationException("Unrecognized log level: " + str(lev))

def configure_log(logfile: str = None, level=None, config: Mapping = None) -> logging.Handler:
    """
    configure the root logger to record messages to a file.

    :param str logfile:   the file to write messages to; if not provided, the ``logfile``
                          configuration parameter is used.
    :param level:         the minimum level of messages to record, either as an integer or
                          a level name; if not provided, the ``loglevel`` configuration parameter
                          is used (default: DEBUG).
    :param dict config:   the configuration to pull defaults from
    :return:  the handler that was attached to the root logger
    """
    if config is None:
        config = {}
    config = section(config)
    if not logfile:
        logfile = config.get('logfile')
    if not logfile:
        raise ConfigurationException("configure_log: no logfile specified")
    if level is None:
        level = config.get('loglevel', logging.DEBUG)
    level = level_for(level)

    logdir = os.path.dirname(logfile)
    if logdir and not os.path.isdir(logdir):
        raise ConfigurationException("configure_log: %s: log directory does not exist" % logdir)

    hdlr = logging.FileHandler(logfile)
    hdlr.setFormatter(logging.Formatter(LOG_FORMAT))
    hdlr.setLevel(level)
    rootlog = logging.getLogger()
    rootlog.addHandler(hdlr)
    if rootlog.level == logging.NOTSET or rootlog.level > level:
        rootlog.setLevel(level)
    return hdlr

def find_config_file() -> str:
    """
    return the path to the configuration file named by the THEMEVIEW_CONFIG environment variable,
    or None if the variable is not set.

    :raises ConfigurationException:  if the variable names a file that does not exist
    """
    cfgfile = os.environ.get(CONFIG_ENV_VAR)
    if not cfgfile:
        return None
    if not os.path.isfile(cfgfile):
        raise ConfigurationException("env var %s: %s: file not found" % (CONFIG_ENV_VAR, cfgfile))
    return cfgfile
