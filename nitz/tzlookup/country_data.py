"""Time zones used by each country.

Zone ids are listed in priority order with the country default first. A
zone with a "not_after" instant became identical to another zone in the same
country at that time, so it only helps to tell zones apart before then.
"""

from typing import Any

COUNTRY_ZONES: list[dict[str, Any]] = [
    {
        "iso_code": "ad",
        "default_zone_id": "Europe/Andorra",
        "zones": ["Europe/Andorra"],
    },
    {
        "iso_code": "ae",
        "default_zone_id": "Asia/Dubai",
        "zones": ["Asia/Dubai"],
    },
    {
        "iso_code": "ar",
        "default_zone_id": "America/Argentina/Buenos_Aires",
        "zones": ["America/Argentina/Buenos_Aires"],
    },
    {
        "iso_code": "at",
        "default_zone_id": "Europe/Vienna",
        "zones": ["Europe/Vienna"],
    },
    {
        "iso_code": "au",
        "default_zone_id": "Australia/Sydney",
        "zones": [
            "Australia/Sydney",
            "Australia/Melbourne",
            "Australia/Brisbane",
            "Australia/Hobart",
            "Australia/Adelaide",
            "Australia/Darwin",
            "Australia/Perth",
            "Australia/Eucla",
            "Australia/Lord_Howe",
            {"zone_id": "Australia/Broken_Hill", "not_after": "2000-03-25T16:00:00+00:00"},
            {"zone_id": "Australia/Lindeman", "not_after": "1994-03-05T16:00:00+00:00"},
        ],
    },
    {
        "iso_code": "be",
        "default_zone_id": "Europe/Brussels",
        "zones": ["Europe/Brussels"],
    },
    {
        "iso_code": "br",
        "default_zone_id": "America/Sao_Paulo",
        "zones": [
            "America/Sao_Paulo",
            "America/Noronha",
            "America/Bahia",
            "America/Fortaleza",
            "America/Recife",
            "America/Belem",
            "America/Cuiaba",
            "America/Manaus",
            "America/Porto_Velho",
            "America/Boa_Vista",
            "America/Rio_Branco",
        ],
    },
    {
        "iso_code": "ca",
        "default_zone_id": "America/Toronto",
        "zones": [
            "America/Toronto",
            "America/Vancouver",
            "America/Edmonton",
            "America/Winnipeg",
            "America/Halifax",
            "America/St_Johns",
            "America/Moncton",
            "America/Regina",
            "America/Whitehorse",
            "America/Iqaluit",
        ],
    },
    {
        "iso_code": "ch",
        "default_zone_id": "Europe/Zurich",
        "zones": ["Europe/Zurich"],
    },
    {
        "iso_code": "cl",
        "default_zone_id": "America/Santiago",
        "zones": ["America/Santiago", "America/Punta_Arenas", "Pacific/Easter"],
    },
    {
        "iso_code": "cn",
        "default_zone_id": "Asia/Shanghai",
        "zones": ["Asia/Shanghai", "Asia/Urumqi"],
    },
    {
        "iso_code": "cz",
        "default_zone_id": "Europe/Prague",
        "zones": ["Europe/Prague"],
    },
    {
        "iso_code": "de",
        "default_zone_id": "Europe/Berlin",
        "zones": [
            "Europe/Berlin",
            {"zone_id": "Europe/Busingen", "not_after": "1980-09-28T01:00:00+00:00"},
        ],
    },
    {
        "iso_code": "dk",
        "default_zone_id": "Europe/Copenhagen",
        "zones": ["Europe/Copenhagen"],
    },
    {
        "iso_code": "eg",
        "default_zone_id": "Africa/Cairo",
        "zones": ["Africa/Cairo"],
    },
    {
        "iso_code": "es",
        "default_zone_id": "Europe/Madrid",
        "zones": ["Europe/Madrid", "Africa/Ceuta", "Atlantic/Canary"],
    },
    {
        "iso_code": "fi",
        "default_zone_id": "Europe/Helsinki",
        "zones": ["Europe/Helsinki"],
    },
    {
        "iso_code": "fm",
        "default_zone_id": "Pacific/Pohnpei",
        "zones": [
            "Pacific/Pohnpei",
            "Pacific/Chuuk",
            {"zone_id": "Pacific/Kosrae", "not_after": "1999-01-01T00:00:00+00:00"},
        ],
    },
    {
        "iso_code": "fr",
        "default_zone_id": "Europe/Paris",
        "zones": ["Europe/Paris"],
    },
    {
        "iso_code": "gb",
        "default_zone_id": "Europe/London",
        "zones": ["Europe/London"],
    },
    {
        "iso_code": "gr",
        "default_zone_id": "Europe/Athens",
        "zones": ["Europe/Athens"],
    },
    {
        "iso_code": "hk",
        "default_zone_id": "Asia/Hong_Kong",
        "zones": ["Asia/Hong_Kong"],
    },
    {
        "iso_code": "id",
        "default_zone_id": "Asia/Jakarta",
        "zones": ["Asia/Jakarta", "Asia/Pontianak", "Asia/Makassar", "Asia/Jayapura"],
    },
    {
        "iso_code": "ie",
        "default_zone_id": "Europe/Dublin",
        "zones": ["Europe/Dublin"],
    },
    {
        "iso_code": "il",
        "default_zone_id": "Asia/Jerusalem",
        "zones": ["Asia/Jerusalem"],
    },
    {
        "iso_code": "in",
        "default_zone_id": "Asia/Kolkata",
        "zones": ["Asia/Kolkata"],
    },
    {
        "iso_code": "is",
        "default_zone_id": "Atlantic/Reykjavik",
        "zones": ["Atlantic/Reykjavik"],
    },
    {
        "iso_code": "it",
        "default_zone_id": "Europe/Rome",
        "zones": ["Europe/Rome"],
    },
    {
        "iso_code": "jp",
        "default_zone_id": "Asia/Tokyo",
        "zones": ["Asia/Tokyo"],
    },
    {
        "iso_code": "ke",
        "default_zone_id": "Africa/Nairobi",
        "zones": ["Africa/Nairobi"],
    },
    {
        "iso_code": "kr",
        "default_zone_id": "Asia/Seoul",
        "zones": ["Asia/Seoul"],
    },
    {
        "iso_code": "mx",
        "default_zone_id": "America/Mexico_City",
        "zones": [
            "America/Mexico_City",
            "America/Cancun",
            "America/Merida",
            "America/Monterrey",
            "America/Chihuahua",
            "America/Mazatlan",
            "America/Hermosillo",
            "America/Tijuana",
        ],
    },
    {
        "iso_code": "ng",
        "default_zone_id": "Africa/Lagos",
        "zones": ["Africa/Lagos"],
    },
    {
        "iso_code": "nl",
        "default_zone_id": "Europe/Amsterdam",
        "zones": ["Europe/Amsterdam"],
    },
    {
        "iso_code": "no",
        "default_zone_id": "Europe/Oslo",
        "zones": ["Europe/Oslo"],
    },
    {
        "iso_code": "nz",
        "default_zone_id": "Pacific/Auckland",
        "default_boost": True,
        "zones": ["Pacific/Auckland", "Pacific/Chatham"],
    },
    {
        "iso_code": "pl",
        "default_zone_id": "Europe/Warsaw",
        "zones": ["Europe/Warsaw"],
    },
    {
        "iso_code": "pt",
        "default_zone_id": "Europe/Lisbon",
        "zones": [
            "Europe/Lisbon",
            "Atlantic/Azores",
            {"zone_id": "Atlantic/Madeira", "not_after": "1996-03-31T01:00:00+00:00"},
        ],
    },
    {
        "iso_code": "ru",
        "default_zone_id": "Europe/Moscow",
        "zones": [
            "Europe/Moscow",
            "Europe/Kaliningrad",
            "Europe/Samara",
            "Asia/Yekaterinburg",
            "Asia/Omsk",
            "Asia/Novosibirsk",
            "Asia/Krasnoyarsk",
            "Asia/Irkutsk",
            "Asia/Yakutsk",
            "Asia/Vladivostok",
            "Asia/Magadan",
            "Asia/Kamchatka",
        ],
    },
    {
        "iso_code": "sa",
        "default_zone_id": "Asia/Riyadh",
        "zones": ["Asia/Riyadh"],
    },
    {
        "iso_code": "se",
        "default_zone_id": "Europe/Stockholm",
        "zones": ["Europe/Stockholm"],
    },
    {
        "iso_code": "sg",
        "default_zone_id": "Asia/Singapore",
        "zones": ["Asia/Singapore"],
    },
    {
        "iso_code": "tr",
        "default_zone_id": "Europe/Istanbul",
        "zones": ["Europe/Istanbul"],
    },
    {
        "iso_code": "ua",
        "default_zone_id": "Europe/Kiev",
        "zones": ["Europe/Kiev"],
    },
    {
        "iso_code": "us",
        "default_zone_id": "America/New_York",
        "zones": [
            "America/New_York",
            {"zone_id": "America/Detroit", "not_after": "1975-04-27T07:00:00+00:00"},
            {
                "zone_id": "America/Kentucky/Louisville",
                "not_after": "1974-10-27T07:00:00+00:00",
            },
            {
                "zone_id": "America/Kentucky/Monticello",
                "not_after": "2000-10-29T07:00:00+00:00",
            },
            {
                "zone_id": "America/Indiana/Indianapolis",
                "not_after": "2006-04-02T07:00:00+00:00",
            },
            {
                "zone_id": "America/Indiana/Vincennes",
                "not_after": "2007-11-04T07:00:00+00:00",
            },
            {
                "zone_id": "America/Indiana/Winamac",
                "not_after": "2007-03-11T08:00:00+00:00",
            },
            {
                "zone_id": "America/Indiana/Marengo",
                "not_after": "2006-04-02T07:00:00+00:00",
            },
            {
                "zone_id": "America/Indiana/Petersburg",
                "not_after": "2007-11-04T07:00:00+00:00",
            },
            {
                "zone_id": "America/Indiana/Vevay",
                "not_after": "2006-04-02T07:00:00+00:00",
            },
            "America/Chicago",
            {
                "zone_id": "America/Indiana/Knox",
                "not_after": "2006-04-02T08:00:00+00:00",
            },
            {"zone_id": "America/Menominee", "not_after": "1973-04-29T08:00:00+00:00"},
            {
                "zone_id": "America/Indiana/Tell_City",
                "not_after": "2006-04-02T08:00:00+00:00",
            },
            {
                "zone_id": "America/North_Dakota/Center",
                "not_after": "1992-10-25T08:00:00+00:00",
            },
            {
                "zone_id": "America/North_Dakota/New_Salem",
                "not_after": "2003-10-26T08:00:00+00:00",
            },
            {
                "zone_id": "America/North_Dakota/Beulah",
                "not_after": "2010-11-07T08:00:00+00:00",
            },
            "America/Denver",
            {"zone_id": "America/Boise", "not_after": "1974-02-03T09:00:00+00:00"},
            "America/Phoenix",
            "America/Los_Angeles",
            "America/Anchorage",
            {"zone_id": "America/Juneau", "not_after": "1983-11-30T10:00:00+00:00"},
            {"zone_id": "America/Sitka", "not_after": "1983-11-30T10:00:00+00:00"},
            {"zone_id": "America/Yakutat", "not_after": "1983-11-30T10:00:00+00:00"},
            {"zone_id": "America/Nome", "not_after": "1983-11-30T10:00:00+00:00"},
            {"zone_id": "America/Metlakatla", "not_after": "2019-03-10T11:00:00+00:00"},
            "America/Adak",
            "Pacific/Honolulu",
        ],
    },
    {
        "iso_code": "za",
        "default_zone_id": "Africa/Johannesburg",
        "zones": ["Africa/Johannesburg"],
    },
]
