"""Candidate language ordering for caption fallback."""

FALLBACK_LANGUAGES = (
    "en", "ko", "ja", "es", "fr", "de", "zh", "pt", "ru", "it", "ar", "hi",
)

# Channel country (ISO 3166-1 alpha-2) -> caption language
COUNTRY_LANGUAGES = {
    "US": "en", "GB": "en", "AU": "en", "CA": "en", "NZ": "en", "IE": "en",
    "KR": "ko",
    "JP": "ja",
    "ES": "es", "MX": "es", "AR": "es", "CO": "es", "CL": "es", "PE": "es",
    "FR": "fr", "BE": "fr",
    "DE": "de", "AT": "de", "CH": "de",
    "CN": "zh", "TW": "zh", "HK": "zh",
    "BR": "pt", "PT": "pt",
    "RU": "ru",
    "IT": "it",
    "SA": "ar", "AE": "ar", "EG": "ar",
    "IN": "hi",
}


def _normalize(code: str | None) -> str | None:
    """Strip the code; pool languages take their canonical lower-case spelling.

    Other tags keep their case since the caption library matches e.g.
    "zh-Hans" exactly.
    """
    if code is None:
        return None
    code = code.strip()
    if code.lower() in FALLBACK_LANGUAGES:
        return code.lower()
    return code or None


def language_for_country(country: str | None) -> str | None:
    if not country:
        return None
    return COUNTRY_LANGUAGES.get(country.strip().upper())


def resolve_languages(
    requested: str | None = None, country: str | None = None
) -> list[str]:
    """Ordered, duplicate-free list of language codes to try.

    An explicit language goes first; otherwise the language guessed from the
    channel country does. The fixed fallback pool follows either way.
    """
    first = _normalize(requested) or language_for_country(country)
    if first is None:
        return list(FALLBACK_LANGUAGES)
    return [first] + [lang for lang in FALLBACK_LANGUAGES if lang.lower() != first.lower()]
