"""
The View class: a located view file plus the arguments used to display it
"""
import os
from collections import namedtuple
from typing import Callable

from .exceptions import InvalidArgument, ViewNotFound
from .plugin import is_plugin_param
from .dirs import DirectoryProvider
from .resolve import find_view

class PathInfo(namedtuple("PathInfo", "dirname basename extension filename")):
    """
    the components of a file path:

    ``dirname``
        the directory containing the file
    ``basename``
        the file's name, including its extension
    ``extension``
        the file's extension without the leading dot (empty if there is none)
    ``filename``
        the file's name without its extension
    """

    @classmethod
    def from_path(cls, path: str):
        path = os.fspath(path)
        dirname, basename = os.path.split(path)
        filename, ext = os.path.splitext(basename)
        return cls(dirname, basename, ext[1:], filename)

    @property
    def path(self) -> str:
        return os.path.join(self.dirname, self.basename)

CLEAN_ARGS = {
    'page_title':    "",
    'wrapper_class': "",
    'wrapper_el':    "",
    'title_wrapper': "%s"
}

DASHBOARD_ARGS = {
    'page_title':    "Page Title",
    'wrapper_class': "wrap",
    'wrapper_el':    "div",
    'title_wrapper': "<h1>%s</h1>"
}

class View(object):
    """
    a view file located among the theme and plugin directories, along with the arguments that
    control how it should be displayed.

    When a view is created for a plugin, its file is looked for first in the active (child)
    theme and the parent theme (under a subdirectory named after the plugin) before falling back
    to the plugin's own copy; this allows themes to override plugin views.  If a plugin is not
    given, the file is looked for in the theme directories only.  See
    :py:func:`themeview.resolve.get_search_paths` for the precise search order.

    A View is intended to be created for a single rendering of the file and then discarded.

    :ivar PathInfo template:  the components of the located file's absolute path
    :ivar dict args:          the display arguments; the predefined ones (``page_title``,
                              ``wrapper_class``, ``wrapper_el``, and ``title_wrapper``) are set
                              by :py:meth:`clean` and :py:meth:`for_dashboard`, but callers may
                              set others directly.
    """

    def __init__(self, file_path: str, plugin=None, is_relative_path: bool=True,
                 dirs: DirectoryProvider=None, exists: Callable[[str], bool]=os.path.exists):
        """
        locate the view file.

        :param str file_path:  the path to the view file.  This must be absolute unless
                               ``is_relative_path`` is True, in which case it is relative to
                               the plugin's root directory (or the theme directory).
        :param plugin:   the plugin the view belongs to, given either as a
                         :py:class:`~themeview.plugin.PluginHandle` or as the name of the
                         plugin's installation directory
        :param bool is_relative_path:  if False, ``file_path`` is taken as the absolute path to
                         the file and no search is done
        :param DirectoryProvider dirs:  the provider of the host directory locations; if not
                         provided, the default provider is used
        :param exists:   a function that returns True if a given path exists
        :raises InvalidArgument:  if ``file_path`` is empty or not a string or if ``plugin`` is
                         neither a PluginHandle nor a string
        :raises ViewNotFound:  if the view file cannot be found
        """
        if isinstance(file_path, os.PathLike):
            file_path = os.fspath(file_path)
        if not isinstance(file_path, str) or not file_path:
            raise InvalidArgument("Cannot create View, invalid file path")
        if plugin is not None and not is_plugin_param(plugin):
            raise InvalidArgument("Invalid plugin parameter for View rendering")

        if is_relative_path:
            abs_path = find_view(file_path, plugin, dirs, exists)
        else:
            if not exists(file_path):
                raise ViewNotFound(file_path, [file_path])
            abs_path = file_path

        self.template = PathInfo.from_path(abs_path)
        self.args = dict(CLEAN_ARGS)

    @property
    def template_path(self) -> str:
        """
        the absolute path to the located view file
        """
        return self.template.path

    def clean(self):
        """
        reset the predefined arguments to their neutral values, providing a clean template.

        :return:  this View instance
        """
        self.args.update(CLEAN_ARGS)
        return self

    def for_dashboard(self):
        """
        set the predefined arguments for display within the host's administrative dashboard.

        :return:  this View instance
        """
        self.args.update(DASHBOARD_ARGS)
        return self

    def format_title(self, title: str=None) -> str:
        """
        return the title wrapped according to the ``title_wrapper`` argument.

        :param str title:  the title text; if not given, the ``page_title`` argument is used
        """
        if title is None:
            title = self.args.get('page_title', "")
        return self.args.get('title_wrapper', "%s").replace("%s", title, 1)

    def __repr__(self):
        return "View(%r)" % self.template_path
