"""Version information for arealint."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to rules or output records
# MINOR: New checks or options, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Contract tests check and parallel extraction
#         - `arealint contracts` reports public modules without a test module
#         - Per-file extraction runs on a thread pool (`jobs` option)
#         - Duplicate module names now abort the run instead of picking one
# 0.1.0 - Initial release
#         - Area access check over `__public__` declarations
#         - YAML configuration and rich CLI output
