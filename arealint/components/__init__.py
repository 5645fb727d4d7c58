"""
Components: the analysis stages and checks.

Components are pure functions over DTOs. They never read files themselves,
except the discovery component, which turns paths into SourceUnits.
"""
