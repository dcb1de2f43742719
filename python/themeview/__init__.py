"""
themeview:  locate view (template fragment) files for a CMS plugin framework.

A view is identified by a path relative to a plugin's (or theme's) source root.  The
:py:class:`~themeview.view.View` class searches the active (child) theme, its parent theme,
and finally the plugin's own directory for that file, letting themes override the views
that plugins ship with.  Rendering the located file is left to the host application.
"""
try:
    from .version import __version__
except ImportError:
    __version__ = "(unset)"

class ThemeViewException(Exception):
    """
    A general base class for exceptions raised by the themeview package
    """
    pass

from .exceptions import InvalidArgument, ViewNotFound, ConfigurationException
from .view import View, PathInfo
from .plugin import PluginHandle, SimplePlugin
from .dirs import DirectoryProvider, StaticDirectories, ConfiguredDirectories
from .resolve import get_search_paths, find_view
