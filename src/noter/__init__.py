"""Creates dated note files inside per-course folders.

If you installed via ``pip``, run ``noter -h`` to get help.

To use the Python API, look at :class:`noter.api.Noter`
"""
