"""
Localization for the Thrissur Facts Alexa Skill.

Resolves the request locale against the language string table and builds
a translate function for a single request. Nothing here is cached or shared
between requests: every call to ``get_translator`` returns a fresh closure
bound to one resolved bundle.

Resolution order, lowest to highest priority:
- the default bundle (``en``)
- the language-only bundle (``en`` for ``en-IN``)
- the exact locale bundle (``en-IN``)
"""

import random
from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType

from fact_skill.data import DEFAULT_LOCALE, LANGUAGE_STRINGS

Translator = Callable[..., str]


class ResourceConfigurationError(Exception):
    """The language string table is unusable. Raised only at startup."""


class MissingResourceError(LookupError):
    """A key could not be resolved for the requested locale."""

    def __init__(self, key: str, locale: str | None):
        super().__init__(f"No resource '{key}' for locale '{locale}'")
        self.key = key
        self.locale = locale


class ResourceTemplateError(ValueError):
    """A resource template does not fit the arguments it was given."""

    def __init__(self, key: str, locale: str | None, cause: Exception):
        super().__init__(
            f"Resource '{key}' for locale '{locale}' cannot be formatted: {cause!r}"
        )
        self.key = key
        self.locale = locale


def _locale_chain(locale: str | None, default_locale: str) -> list[str]:
    """Return the locales to merge, lowest priority first."""
    chain = [default_locale]
    if not locale:
        return chain

    language = locale.split("-", 1)[0]
    for candidate in (language, locale):
        if candidate not in chain:
            chain.append(candidate)
    return chain


def resolve_bundle(
    locale: str | None,
    bundles: Mapping[str, Mapping] = LANGUAGE_STRINGS,
    default_locale: str = DEFAULT_LOCALE,
) -> Mapping[str, str | Sequence[str]]:
    """
    Resolve a locale to a read-only bundle.

    Unknown locales resolve to the default bundle. Keys missing from a
    regional bundle are taken from its language bundle, then the default.

    Args:
        locale: Locale from the request, e.g. "en-US". May be None.
        bundles: Mapping of locale to key/value table.
        default_locale: Locale used when nothing more specific exists.

    Returns:
        Read-only mapping of key to string or tuple of strings.

    Raises:
        ResourceConfigurationError: If the default bundle is missing.
    """
    if default_locale not in bundles:
        raise ResourceConfigurationError(f"Default locale '{default_locale}' has no bundle")

    merged = {}
    for candidate in _locale_chain(locale, default_locale):
        for key, value in bundles.get(candidate, {}).items():
            # Lists are copied to tuples so the shared table stays untouched
            merged[key] = tuple(value) if isinstance(value, list) else value
    return MappingProxyType(merged)


def get_translator(
    locale: str | None,
    bundles: Mapping[str, Mapping] = LANGUAGE_STRINGS,
    default_locale: str = DEFAULT_LOCALE,
) -> Translator:
    """
    Build the translate function for one request.

    The returned ``t(key, *args)`` picks a random element for list values
    and fills positional ``{}`` placeholders for string values. Unknown keys
    raise MissingResourceError; placeholders that do not match the arguments
    raise ResourceTemplateError.
    """
    bundle = resolve_bundle(locale, bundles, default_locale)

    def t(key: str, *args) -> str:
        try:
            value = bundle[key]
        except KeyError:
            raise MissingResourceError(key, locale) from None

        if isinstance(value, (list, tuple)):
            return random.choice(value)
        if args:
            try:
                return value.format(*args)
            except (IndexError, KeyError) as exc:
                raise ResourceTemplateError(key, locale, exc) from exc
        return value

    return t


def validate_bundles(
    bundles: Mapping[str, Mapping],
    required_keys: Sequence[str],
    default_locale: str = DEFAULT_LOCALE,
) -> None:
    """
    Check the language string table before the skill serves requests.

    Raises:
        ResourceConfigurationError: If the default bundle is missing, a value
            is not a string or a non-empty list of strings, or a required
            key cannot be resolved for some locale.
    """
    if default_locale not in bundles:
        raise ResourceConfigurationError(f"Default locale '{default_locale}' has no bundle")

    for locale, table in bundles.items():
        for key, value in table.items():
            if isinstance(value, str):
                continue
            if (
                isinstance(value, (list, tuple))
                and value
                and all(isinstance(item, str) for item in value)
            ):
                continue
            raise ResourceConfigurationError(
                f"Resource '{key}' for locale '{locale}' must be a string "
                "or a non-empty list of strings"
            )

        resolved = resolve_bundle(locale, bundles, default_locale)
        missing = [key for key in required_keys if key not in resolved]
        if missing:
            raise ResourceConfigurationError(
                f"Locale '{locale}' cannot resolve: {', '.join(missing)}"
            )
