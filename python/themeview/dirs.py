"""
Providers of the host application's directory layout: where the active (child) theme, its
parent theme, and the content directory (under which plugins are installed) live.
"""
import os, logging
from abc import ABCMeta, abstractmethod
from collections.abc import Mapping

from .exceptions import ConfigurationException
from . import config as cfgmod

log = logging.getLogger("themeview.dirs")

CHILD_THEME_ENV_VAR = "THEMEVIEW_CHILD_THEME_DIR"
PARENT_THEME_ENV_VAR = "THEMEVIEW_PARENT_THEME_DIR"
CONTENT_DIR_ENV_VAR = "THEMEVIEW_CONTENT_DIR"

class DirectoryProvider(metaclass=ABCMeta):
    """
    an interface to the host application's directory conventions.  Returned paths may carry
    trailing separators; callers normalize them before use.
    """

    @abstractmethod
    def child_theme_dir(self) -> str:
        """
        return the directory of the active theme (sometimes called the stylesheet directory)
        """
        raise NotImplementedError()

    @abstractmethod
    def parent_theme_dir(self) -> str:
        """
        return the directory of the theme that the active theme is based on (sometimes called
        the template directory).  When the active theme is not a child theme, this is the same
        as :py:meth:`child_theme_dir`.
        """
        raise NotImplementedError()

    @abstractmethod
    def content_dir(self) -> str:
        """
        return the host's content directory; plugins are installed in its ``plugins``
        subdirectory.
        """
        raise NotImplementedError()

class StaticDirectories(DirectoryProvider):
    """
    a DirectoryProvider that returns fixed directory paths
    """

    def __init__(self, child_theme: str, parent_theme: str = None, content_dir: str = None):
        """
        :param str child_theme:   the active theme's directory
        :param str parent_theme:  the parent theme's directory; defaults to ``child_theme``
        :param str content_dir:   the host's content directory
        """
        if not child_theme:
            raise ConfigurationException("StaticDirectories: child_theme directory not provided")
        self._child = os.fspath(child_theme)
        self._parent = os.fspath(parent_theme) if parent_theme else self._child
        self._content = os.fspath(content_dir) if content_dir else None

    def child_theme_dir(self) -> str:
        return self._child

    def parent_theme_dir(self) -> str:
        return self._parent

    def content_dir(self) -> str:
        if self._content is None:
            raise ConfigurationException("content directory not configured")
        return self._content

class ConfiguredDirectories(StaticDirectories):
    """
    a DirectoryProvider whose directories are set via a configuration dictionary.  See
    :py:mod:`themeview.config` for the parameters supported.
    """

    def __init__(self, config: Mapping):
        config = cfgmod.section(config)
        if not config.get('child_theme'):
            raise ConfigurationException("ConfiguredDirectories: missing config parameter: child_theme")
        if not config.get('content_dir'):
            raise ConfigurationException("ConfiguredDirectories: missing config parameter: content_dir")
        super(ConfiguredDirectories, self).__init__(config['child_theme'],
                                                    config.get('parent_theme'),
                                                    config['content_dir'])

_default_provider = None

def set_default_provider(provider: DirectoryProvider):
    """
    set the DirectoryProvider to use when a caller does not provide one explicitly.  Passing
    None clears the default so that the next call to :py:func:`get_default_provider` rebuilds
    it from the environment.
    """
    global _default_provider
    if provider is not None and not isinstance(provider, DirectoryProvider):
        raise TypeError("set_default_provider(): not a DirectoryProvider: " + repr(provider))
    _default_provider = provider

def get_default_provider(config: Mapping = None) -> DirectoryProvider:
    """
    return the DirectoryProvider to use when a caller does not provide one explicitly.

    If a default was set via :py:func:`set_default_provider`, it is returned.  Otherwise, one
    is built from (in order of preference) the given configuration, the configuration file
    named by the THEMEVIEW_CONFIG environment variable, or the THEMEVIEW_CHILD_THEME_DIR,
    THEMEVIEW_PARENT_THEME_DIR, and THEMEVIEW_CONTENT_DIR environment variables.  A provider
    built from the environment is cached as the default.

    :raises ConfigurationException:  if the required directories cannot be determined
    """
    global _default_provider
    if config is not None:
        return ConfiguredDirectories(config)
    if _default_provider:
        return _default_provider

    cfgfile = cfgmod.find_config_file()
    if cfgfile:
        log.debug("Loading directory configuration from %s", cfgfile)
        provider = ConfiguredDirectories(cfgmod.load_from_file(cfgfile))
    elif os.environ.get(CHILD_THEME_ENV_VAR):
        provider = StaticDirectories(os.environ[CHILD_THEME_ENV_VAR],
                                     os.environ.get(PARENT_THEME_ENV_VAR),
                                     os.environ.get(CONTENT_DIR_ENV_VAR))
    else:
        raise ConfigurationException("Unable to determine theme directories; set %s or %s" %
                                     (cfgmod.CONFIG_ENV_VAR, CHILD_THEME_ENV_VAR))

    _default_provider = provider
    return provider
