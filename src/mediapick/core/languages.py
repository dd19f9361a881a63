"""ISO-639 language lookup for subtitle files.

Subtitle filenames usually end with a language hint such as ``.en``, ``.eng``
or ``.English``. This module maps any of those forms onto the 3-letter
ISO-639-2 (bibliographic) code that mkvmerge expects.
"""

from typing import Optional

# (ISO-639-1, ISO-639-2/B, English name)
LANGUAGES: tuple[tuple[str, str, str], ...] = (
    ("ab", "abk", "Abkhazian"),
    ("aa", "aar", "Afar"),
    ("af", "afr", "Afrikaans"),
    ("ak", "aka", "Akan"),
    ("sq", "alb", "Albanian"),
    ("am", "amh", "Amharic"),
    ("ar", "ara", "Arabic"),
    ("an", "arg", "Aragonese"),
    ("hy", "arm", "Armenian"),
    ("as", "asm", "Assamese"),
    ("av", "ava", "Avaric"),
    ("ae", "ave", "Avestan"),
    ("ay", "aym", "Aymara"),
    ("az", "aze", "Azerbaijani"),
    ("bm", "bam", "Bambara"),
    ("ba", "bak", "Bashkir"),
    ("eu", "baq", "Basque"),
    ("be", "bel", "Belarusian"),
    ("bn", "ben", "Bengali"),
    ("bh", "bih", "Bihari languages"),
    ("bi", "bis", "Bislama"),
    ("bs", "bos", "Bosnian"),
    ("br", "bre", "Breton"),
    ("bg", "bul", "Bulgarian"),
    ("my", "bur", "Burmese"),
    ("ca", "cat", "Catalan"),
    ("ch", "cha", "Chamorro"),
    ("ce", "che", "Chechen"),
    ("zh", "chi", "Chinese"),
    ("cu", "chu", "Church Slavic"),
    ("cv", "chv", "Chuvash"),
    ("kw", "cor", "Cornish"),
    ("co", "cos", "Corsican"),
    ("cr", "cre", "Cree"),
    ("hr", "hrv", "Croatian"),
    ("cs", "cze", "Czech"),
    ("da", "dan", "Danish"),
    ("dv", "div", "Dhivehi"),
    ("nl", "dut", "Dutch"),
    ("dz", "dzo", "Dzongkha"),
    ("en", "eng", "English"),
    ("eo", "epo", "Esperanto"),
    ("et", "est", "Estonian"),
    ("ee", "ewe", "Ewe"),
    ("fo", "fao", "Faroese"),
    ("fj", "fij", "Fijian"),
    ("fi", "fin", "Finnish"),
    ("fr", "fre", "French"),
    ("ff", "ful", "Fulah"),
    ("gl", "glg", "Galician"),
    ("lg", "lug", "Ganda"),
    ("ka", "geo", "Georgian"),
    ("de", "ger", "German"),
    ("el", "gre", "Greek"),
    ("gn", "grn", "Guarani"),
    ("gu", "guj", "Gujarati"),
    ("ht", "hat", "Haitian"),
    ("ha", "hau", "Hausa"),
    ("he", "heb", "Hebrew"),
    ("hz", "her", "Herero"),
    ("hi", "hin", "Hindi"),
    ("ho", "hmo", "Hiri Motu"),
    ("hu", "hun", "Hungarian"),
    ("is", "ice", "Icelandic"),
    ("io", "ido", "Ido"),
    ("ig", "ibo", "Igbo"),
    ("id", "ind", "Indonesian"),
    ("ia", "ina", "Interlingua"),
    ("ie", "ile", "Interlingue"),
    ("iu", "iku", "Inuktitut"),
    ("ik", "ipk", "Inupiaq"),
    ("ga", "gle", "Irish"),
    ("it", "ita", "Italian"),
    ("ja", "jpn", "Japanese"),
    ("jv", "jav", "Javanese"),
    ("kl", "kal", "Kalaallisut"),
    ("kn", "kan", "Kannada"),
    ("kr", "kau", "Kanuri"),
    ("ks", "kas", "Kashmiri"),
    ("kk", "kaz", "Kazakh"),
    ("km", "khm", "Khmer"),
    ("ki", "kik", "Kikuyu"),
    ("rw", "kin", "Kinyarwanda"),
    ("ky", "kir", "Kirghiz"),
    ("kv", "kom", "Komi"),
    ("kg", "kon", "Kongo"),
    ("ko", "kor", "Korean"),
    ("kj", "kua", "Kuanyama"),
    ("ku", "kur", "Kurdish"),
    ("lo", "lao", "Lao"),
    ("la", "lat", "Latin"),
    ("lv", "lav", "Latvian"),
    ("li", "lim", "Limburgan"),
    ("ln", "lin", "Lingala"),
    ("lt", "lit", "Lithuanian"),
    ("lu", "lub", "Luba-Katanga"),
    ("lb", "ltz", "Luxembourgish"),
    ("mk", "mac", "Macedonian"),
    ("mg", "mlg", "Malagasy"),
    ("ms", "may", "Malay"),
    ("ml", "mal", "Malayalam"),
    ("mt", "mlt", "Maltese"),
    ("gv", "glv", "Manx"),
    ("mi", "mao", "Maori"),
    ("mr", "mar", "Marathi"),
    ("mh", "mah", "Marshallese"),
    ("mn", "mon", "Mongolian"),
    ("na", "nau", "Nauru"),
    ("nv", "nav", "Navajo"),
    ("ng", "ndo", "Ndonga"),
    ("ne", "nep", "Nepali"),
    ("nd", "nde", "North Ndebele"),
    ("se", "sme", "Northern Sami"),
    ("nb", "nob", "Norwegian Bokmål"),
    ("nn", "nno", "Norwegian Nynorsk"),
    ("no", "nor", "Norwegian"),
    ("ny", "nya", "Nyanja"),
    ("oc", "oci", "Occitan"),
    ("oj", "oji", "Ojibwa"),
    ("or", "ori", "Oriya"),
    ("om", "orm", "Oromo"),
    ("os", "oss", "Ossetian"),
    ("pi", "pli", "Pali"),
    ("pa", "pan", "Panjabi"),
    ("fa", "per", "Persian"),
    ("", "fil", "Filipino"),
    ("pl", "pol", "Polish"),
    ("pt", "por", "Portuguese"),
    ("ps", "pus", "Pushto"),
    ("qu", "que", "Quechua"),
    ("ro", "rum", "Romanian"),
    ("rm", "roh", "Romansh"),
    ("rn", "run", "Rundi"),
    ("ru", "rus", "Russian"),
    ("sm", "smo", "Samoan"),
    ("sg", "sag", "Sango"),
    ("sa", "san", "Sanskrit"),
    ("sc", "srd", "Sardinian"),
    ("gd", "gla", "Scottish Gaelic"),
    ("sr", "srp", "Serbian"),
    ("sn", "sna", "Shona"),
    ("ii", "iii", "Sichuan Yi"),
    ("sd", "snd", "Sindhi"),
    ("si", "sin", "Sinhala"),
    ("sk", "slo", "Slovak"),
    ("sl", "slv", "Slovenian"),
    ("so", "som", "Somali"),
    ("nr", "nbl", "South Ndebele"),
    ("st", "sot", "Southern Sotho"),
    ("es", "spa", "Spanish"),
    ("su", "sun", "Sundanese"),
    ("sw", "swa", "Swahili"),
    ("ss", "ssw", "Swati"),
    ("sv", "swe", "Swedish"),
    ("tl", "tgl", "Tagalog"),
    ("ty", "tah", "Tahitian"),
    ("tg", "tgk", "Tajik"),
    ("ta", "tam", "Tamil"),
    ("tt", "tat", "Tatar"),
    ("te", "tel", "Telugu"),
    ("th", "tha", "Thai"),
    ("bo", "tib", "Tibetan"),
    ("ti", "tir", "Tigrinya"),
    ("to", "ton", "Tonga"),
    ("ts", "tso", "Tsonga"),
    ("tn", "tsn", "Tswana"),
    ("tr", "tur", "Turkish"),
    ("tk", "tuk", "Turkmen"),
    ("tw", "twi", "Twi"),
    ("ug", "uig", "Uighur"),
    ("uk", "ukr", "Ukrainian"),
    ("ur", "urd", "Urdu"),
    ("uz", "uzb", "Uzbek"),
    ("ve", "ven", "Venda"),
    ("vi", "vie", "Vietnamese"),
    ("vo", "vol", "Volapük"),
    ("wa", "wln", "Walloon"),
    ("cy", "wel", "Welsh"),
    ("fy", "fry", "Western Frisian"),
    ("wo", "wol", "Wolof"),
    ("xh", "xho", "Xhosa"),
    ("yi", "yid", "Yiddish"),
    ("yo", "yor", "Yoruba"),
    ("za", "zha", "Zhuang"),
    ("zu", "zul", "Zulu"),
)

_BY_ISO639_1 = {iso1: iso2 for iso1, iso2, _ in LANGUAGES}
_BY_ISO639_2 = {iso2: name for _, iso2, name in LANGUAGES}
_BY_NAME = {name.lower(): iso2 for _, iso2, name in LANGUAGES}


def to_iso639_2(language: Optional[str]) -> Optional[str]:
    """Return the 3-letter ISO-639-2 code for *language*, or None if unknown.

    Args:
        language: A 2-letter code, a 3-letter code or an English language
            name. Matching is case-insensitive.

    Returns:
        The canonical 3-letter code, or None when no language matches.
    """
    if language is None or len(language) < 2:
        return None
    key = language.lower()
    if len(key) == 2:
        return _BY_ISO639_1.get(key)
    if len(key) == 3:
        return key if key in _BY_ISO639_2 else None
    return _BY_NAME.get(key)


def long_name(code: Optional[str]) -> Optional[str]:
    """Return the English name for a 3-letter ISO-639-2 *code*."""
    if code is None:
        return None
    return _BY_ISO639_2.get(code)
