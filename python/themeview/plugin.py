"""
Representations of the plugin whose views are being located.

A plugin can be identified either by a :py:class:`PluginHandle` object or simply by the name of
its installation directory.  Either form is reduced to a :py:class:`PluginRef` before search
paths are computed.
"""
from abc import ABCMeta, abstractmethod
from collections import namedtuple
from collections.abc import Mapping

from .exceptions import InvalidArgument, ConfigurationException
from .utils import maybe_strip_trailing_slash

PluginRef = namedtuple("PluginRef", "src_dir dirname")
PluginRef.__doc__ = \
    """the location of a plugin: its source directory and the name of its installation directory"""

class PluginHandle(metaclass=ABCMeta):
    """
    an interface to a plugin that knows where its files are installed
    """

    @abstractmethod
    def get_src_dir(self) -> str:
        """
        return the absolute path to the plugin's source directory; view paths requested on
        behalf of the plugin are relative to this directory.
        """
        raise NotImplementedError()

    @abstractmethod
    def get_relative_dir(self) -> str:
        """
        return the name of the plugin's directory relative to the plugins directory.  Themes
        override the plugin's views in a subdirectory with this name.
        """
        raise NotImplementedError()

class SimplePlugin(PluginHandle):
    """
    a PluginHandle with a fixed directory name and source directory
    """

    def __init__(self, dirname: str, src_dir: str):
        if not dirname:
            raise InvalidArgument("SimplePlugin: dirname not provided")
        if not src_dir:
            raise InvalidArgument("SimplePlugin: src_dir not provided")
        self.dirname = dirname
        self.src_dir = src_dir

    @classmethod
    def from_config(cls, config: Mapping):
        """
        create a handle from a configuration dictionary containing ``dirname`` and ``src_dir``
        parameters
        """
        for param in ('dirname', 'src_dir'):
            if not config.get(param):
                raise ConfigurationException("SimplePlugin: missing config parameter: " + param)
        return cls(config['dirname'], config['src_dir'])

    def get_src_dir(self) -> str:
        return self.src_dir

    def get_relative_dir(self) -> str:
        return self.dirname

    def __repr__(self):
        return "SimplePlugin(%r, %r)" % (self.dirname, self.src_dir)

def is_plugin_param(plugin) -> bool:
    """
    return True if the given value is an acceptable plugin identity: a PluginHandle or a string
    """
    return isinstance(plugin, (PluginHandle, str))

def normalize_plugin(plugin, content_dir: str = None) -> PluginRef:
    """
    reduce a plugin identity to a :py:class:`PluginRef`.

    :param plugin:   either a :py:class:`PluginHandle` or the name of the plugin's directory
                     under ``{content_dir}/plugins``
    :param str content_dir:  the host's content directory; required when ``plugin`` is a string
    :raises InvalidArgument:  if ``plugin`` is neither a PluginHandle nor a string
    """
    if isinstance(plugin, PluginHandle):
        return PluginRef(maybe_strip_trailing_slash(plugin.get_src_dir()), plugin.get_relative_dir())
    if isinstance(plugin, str):
        if not plugin:
            raise InvalidArgument("Plugin name is empty")
        if not content_dir:
            raise ConfigurationException("content directory needed to locate plugin " + plugin)
        return PluginRef(maybe_strip_trailing_slash(content_dir) + "/plugins/" + plugin, plugin)
    raise InvalidArgument("Plugin parameter is neither a PluginHandle nor a string: " + repr(plugin))
