from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import pandas as pd

    from ryandata_postal_utils.manager import PostalCodeManager

_ERROR_MODES = ("coerce", "ignore", "raise")


def _is_missing(value: Any) -> bool:
    import pandas as pd

    return value is None or (not isinstance(value, str) and bool(pd.isna(value)))


def _resolve_manager(manager: PostalCodeManager | None) -> PostalCodeManager:
    if manager is not None:
        return manager
    from ryandata_postal_utils.manager import PostalCodeManager

    return PostalCodeManager()


def _format_value(value: Any, country: Any, manager: PostalCodeManager, errors: str) -> Any:
    if _is_missing(value) or _is_missing(country):
        return None
    if errors == "raise":
        return manager.format(str(value), str(country))
    formatted = manager.format_or_none(str(value), str(country))
    if formatted is None and errors == "ignore":
        return value
    return formatted


def _check_errors(errors: str) -> None:
    if errors not in _ERROR_MODES:
        raise ValueError(f"errors must be one of {', '.join(_ERROR_MODES)}, got {errors!r}")


def validate_postal_codes(
    series: pd.Series,
    country: str,
    *,
    manager: PostalCodeManager | None = None,
) -> pd.Series:
    """Check every postal code in a Series against one country.

    Args:
        series: Raw postal codes.
        country: ISO 3166-1 alpha-2 code for all rows.
        manager: Optional PostalCodeManager to use.

    Returns:
        Boolean Series; missing values are False.
    """
    mgr = _resolve_manager(manager)
    return series.map(
        lambda x: False if _is_missing(x) else mgr.validate(str(x), country)
    ).astype(bool)


def format_postal_codes(
    series: pd.Series,
    country: str,
    *,
    manager: PostalCodeManager | None = None,
    errors: str = "coerce",
) -> pd.Series:
    """Format every postal code in a Series for one country.

    Args:
        series: Raw postal codes.
        country: ISO 3166-1 alpha-2 code for all rows.
        manager: Optional PostalCodeManager to use.
        errors: How to handle invalid codes ("coerce" -> None, "ignore" -> keep
            the original value, "raise" -> raise the error).

    Returns:
        Series of formatted postal codes; missing values stay None.

    Raises:
        ValueError: If ``errors`` is not a known mode.
        PostalCodeError: With ``errors="raise"``, for the first invalid code.
    """
    _check_errors(errors)
    mgr = _resolve_manager(manager)
    return series.map(lambda x: _format_value(x, country, mgr, errors)).astype(object)


def format_postal_code_column(
    df: pd.DataFrame,
    postal_column: str,
    country_column: str,
    *,
    manager: PostalCodeManager | None = None,
    errors: str = "coerce",
    output_column: str | None = None,
    inplace: bool = False,
) -> pd.DataFrame:
    """Format a DataFrame column of postal codes using a per-row country.

    Args:
        df: Input DataFrame.
        postal_column: Column holding raw postal codes.
        country_column: Column holding ISO 3166-1 alpha-2 codes.
        manager: Optional PostalCodeManager to use.
        errors: How to handle invalid codes ("raise", "coerce", "ignore").
        output_column: Column to write; defaults to overwriting ``postal_column``.
        inplace: If True, modify DataFrame in place.

    Returns:
        DataFrame with the formatted column.
    """
    _check_errors(errors)
    mgr = _resolve_manager(manager)
    result = df if inplace else df.copy()

    formatted = [
        _format_value(value, country, mgr, errors)
        for value, country in zip(result[postal_column], result[country_column])
    ]
    result[output_column or postal_column] = formatted
    return result


class PostalCodeAccessor:
    """Pandas accessor for postal code validation and formatting.

    Usage:
        >>> from ryandata_postal_utils.pandas_ext import register_accessor
        >>> register_accessor()
        >>> s = pd.Series(["wc2e9rz", "SW1A 1AA"])
        >>> s.postal.format("GB")
    """

    def __init__(self, pandas_obj: pd.Series) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas Series this accessor is attached to.
        """
        self._obj = pandas_obj

    def validate(self, country: str, *, manager: PostalCodeManager | None = None) -> pd.Series:
        """Validate every value in the Series. See validate_postal_codes."""
        return validate_postal_codes(self._obj, country, manager=manager)

    def format(
        self,
        country: str,
        *,
        manager: PostalCodeManager | None = None,
        errors: str = "coerce",
    ) -> pd.Series:
        """Format every value in the Series. See format_postal_codes."""
        return format_postal_codes(self._obj, country, manager=manager, errors=errors)


def register_accessor(name: str = "postal") -> None:
    """Register the postal code accessor on pandas Series.

    After calling this, you can use:
        >>> series.postal.validate("PL")
        >>> series.postal.format("PL")

    Args:
        name: Name for the accessor (default: "postal").
    """
    import pandas as pd

    if not hasattr(pd.Series, name):
        pd.api.extensions.register_series_accessor(name)(PostalCodeAccessor)
