"""
filteroption – list-query normalization helpers.

Import path convention::

    from filteroption.application.filtering import FilterOption, PreResultSet
    from filteroption.config import FilterSettings, EnvSettingsLoader
    from filteroption.kernel.errors import ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
