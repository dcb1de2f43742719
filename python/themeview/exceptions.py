"""
Exceptions raised while locating view files
"""
from typing import List

from . import ThemeViewException

class InvalidArgument(ThemeViewException, ValueError):
    """
    an exception indicating that a view was requested with malformed inputs (e.g. an empty file
    path or an unrecognized plugin parameter).  The caller must fix the call.
    """
    pass

class ConfigurationException(ThemeViewException):
    """
    an exception indicating that the configuration needed to locate theme and plugin directories
    is missing or invalid.
    """
    pass

class ViewNotFound(ThemeViewException):
    """
    an exception indicating that a requested view file could not be found in any of the
    locations searched.

    This exception includes two extra public properties: ``requested``, the file path as it
    was requested, and ``candidates``, the list of locations that were checked, in the
    order they were checked.
    """

    def __init__(self, requested: str, candidates: List[str] = None, message: str = None):
        """
        create the exception

        :param str requested:   the view file path as requested by the caller
        :param list candidates: the absolute paths that were searched
        :param str message:     an explanation of the problem; if not provided, one will be
                                generated listing the searched locations
        """
        if candidates is None:
            candidates = []
        if not message:
            message = f"File {requested} does not exist in any of these locations: " + \
                      ",\n".join(candidates)
        super(ViewNotFound, self).__init__(message)
        self.requested = requested
        self.candidates = list(candidates)
