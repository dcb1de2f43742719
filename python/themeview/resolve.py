"""
Functions for locating view files among the theme and plugin directories.

A view requested on behalf of a plugin (e.g. ``src/views/foo.php``) is searched for in these
locations, in order:

  1. ``{child_theme}/{plugin_dirname}/views/foo.php``
  2. ``{child_theme}/{plugin_dirname}/foo.php``
  3. ``{parent_theme}/{plugin_dirname}/views/foo.php``
  4. ``{parent_theme}/{plugin_dirname}/foo.php``
  5. ``{plugin_src_dir}/src/views/foo.php``

where a leading ``src/`` is dropped from the requested path when looking in the theme
directories.  A view requested without a plugin is searched for only in the child and then
the parent theme directory.
"""
import os, re, logging
from typing import List, Callable

from .exceptions import InvalidArgument, ViewNotFound
from .plugin import normalize_plugin, PluginHandle
from .dirs import DirectoryProvider, get_default_provider
from .utils import maybe_strip_trailing_slash, blab

log = logging.getLogger("themeview.resolve")

_src_prefix_re = re.compile(r"^/?src/")

def strip_src_prefix(relpath: str) -> str:
    """
    remove a single leading ``src/`` (or ``/src/``) directory from the given relative path
    """
    return _src_prefix_re.sub("", relpath, count=1)

def _split(relpath: str):
    dirpart, sep, base = relpath.rpartition("/")
    return dirpart, base

def _theme_dirs(dirs: DirectoryProvider) -> List[str]:
    return [maybe_strip_trailing_slash(dirs.child_theme_dir()),
            maybe_strip_trailing_slash(dirs.parent_theme_dir())]

def _uniq(paths: List[str]) -> List[str]:
    seen = set()
    out = []
    for p in paths:
        if p not in seen:
            seen.add(p)
            out.append(p)
    return out

def get_search_paths(relpath: str, plugin=None, dirs: DirectoryProvider = None) -> List[str]:
    """
    return the list of absolute paths where a view file with the given relative path may be
    found, in order of preference.  Duplicate paths are removed.

    :param str relpath:  the path to the view file relative to the plugin's root directory
                         (or to the theme directory if ``plugin`` is not provided)
    :param plugin:       the plugin the view belongs to, given either as a
                         :py:class:`~themeview.plugin.PluginHandle` or the name of the plugin's
                         installation directory; if None, only the theme directories are searched
    :param DirectoryProvider dirs:  the provider of the host directory locations; if not
                         provided, the default provider is used.
    :raises InvalidArgument:  if ``relpath`` is empty, ends in a ``/``, or ``plugin`` is not a recognized type
    """
    if not isinstance(relpath, str) or not relpath:
        raise InvalidArgument("View file path must be a non-empty string")
    if relpath.endswith("/"):
        raise InvalidArgument("View file path must name a file, not a directory: " + relpath)
    if plugin is not None and not isinstance(plugin, (PluginHandle, str)):
        raise InvalidArgument("Plugin parameter is neither a PluginHandle nor a string: " + repr(plugin))
    if dirs is None:
        dirs = get_default_provider()

    if plugin is None:
        return _uniq([tdir + "/" + relpath for tdir in _theme_dirs(dirs)])

    content_dir = dirs.content_dir() if isinstance(plugin, str) else None
    pref = normalize_plugin(plugin, content_dir)
    plugin_path = pref.src_dir + "/" + relpath

    relpath = strip_src_prefix(relpath)
    subdir, base = _split(relpath)
    paths = []
    for tdir in _theme_dirs(dirs):
        pdir = tdir + "/" + pref.dirname
        if subdir:
            paths.append(pdir + "/" + subdir + "/" + base)
        else:
            paths.append(pdir + "/" + base)
        paths.append(pdir + "/" + base)
    paths.append(plugin_path)

    return _uniq(paths)

def find_view(relpath: str, plugin=None, dirs: DirectoryProvider = None,
              exists: Callable[[str], bool] = os.path.exists) -> str:
    """
    return the absolute path to the first existing file among the locations returned by
    :py:func:`get_search_paths`.

    :param str relpath:  the path to the view file relative to the plugin's root directory
    :param plugin:       the plugin the view belongs to (see :py:func:`get_search_paths`)
    :param DirectoryProvider dirs:  the provider of the host directory locations
    :param exists:       a function that returns True if a given path exists
    :raises ViewNotFound:  if the file does not exist in any of the searched locations
    :raises InvalidArgument:  if ``relpath`` or ``plugin`` is malformed
    """
    candidates = get_search_paths(relpath, plugin, dirs)
    for path in candidates:
        blab(log, "Looking for view at %s", path)
        if exists(path):
            log.debug("Found view %s at %s", relpath, path)
            return path

    log.warning("View %s not found (searched %d locations)", relpath, len(candidates))
    raise ViewNotFound(relpath, candidates)
