"""Business timezones offered when configuring a shift picker.

The list is what the options editor presents. The resolver itself
accepts any zone known to the timezone database.
"""

DEFAULT_TIMEZONE = "Europe/Warsaw"

BUSINESS_TIMEZONES: tuple[tuple[str, str], ...] = (
    # Europe
    ("Europe/Warsaw", "Europe/Warsaw (Poland, CET/CEST)"),
    ("Europe/London", "Europe/London (UK, GMT/BST)"),
    ("Europe/Paris", "Europe/Paris (France, CET/CEST)"),
    ("Europe/Berlin", "Europe/Berlin (Germany, CET/CEST)"),
    ("Europe/Rome", "Europe/Rome (Italy, CET/CEST)"),
    ("Europe/Madrid", "Europe/Madrid (Spain, CET/CEST)"),
    ("Europe/Amsterdam", "Europe/Amsterdam (Netherlands, CET/CEST)"),
    ("Europe/Brussels", "Europe/Brussels (Belgium, CET/CEST)"),
    ("Europe/Vienna", "Europe/Vienna (Austria, CET/CEST)"),
    ("Europe/Stockholm", "Europe/Stockholm (Sweden, CET/CEST)"),
    ("Europe/Copenhagen", "Europe/Copenhagen (Denmark, CET/CEST)"),
    ("Europe/Oslo", "Europe/Oslo (Norway, CET/CEST)"),
    ("Europe/Helsinki", "Europe/Helsinki (Finland, EET/EEST)"),
    ("Europe/Athens", "Europe/Athens (Greece, EET/EEST)"),
    ("Europe/Bucharest", "Europe/Bucharest (Romania, EET/EEST)"),
    ("Europe/Prague", "Europe/Prague (Czech Republic, CET/CEST)"),
    ("Europe/Budapest", "Europe/Budapest (Hungary, CET/CEST)"),
    ("Europe/Lisbon", "Europe/Lisbon (Portugal, WET/WEST)"),
    ("Europe/Dublin", "Europe/Dublin (Ireland, GMT/IST)"),
    ("Europe/Moscow", "Europe/Moscow (Russia, MSK)"),
    ("Europe/Istanbul", "Europe/Istanbul (Turkey, TRT)"),
    # Americas
    ("America/New_York", "America/New_York (US Eastern, EST/EDT)"),
    ("America/Chicago", "America/Chicago (US Central, CST/CDT)"),
    ("America/Denver", "America/Denver (US Mountain, MST/MDT)"),
    ("America/Los_Angeles", "America/Los_Angeles (US Pacific, PST/PDT)"),
    ("America/Phoenix", "America/Phoenix (US Arizona, MST)"),
    ("America/Toronto", "America/Toronto (Canada Eastern, EST/EDT)"),
    ("America/Vancouver", "America/Vancouver (Canada Pacific, PST/PDT)"),
    ("America/Mexico_City", "America/Mexico_City (Mexico, CST/CDT)"),
    ("America/Sao_Paulo", "America/Sao_Paulo (Brazil, BRT/BRST)"),
    ("America/Buenos_Aires", "America/Buenos_Aires (Argentina, ART)"),
    ("America/Santiago", "America/Santiago (Chile, CLT/CLST)"),
    ("America/Bogota", "America/Bogota (Colombia, COT)"),
    # Asia
    ("Asia/Tokyo", "Asia/Tokyo (Japan, JST)"),
    ("Asia/Shanghai", "Asia/Shanghai (China, CST)"),
    ("Asia/Hong_Kong", "Asia/Hong_Kong (Hong Kong, HKT)"),
    ("Asia/Singapore", "Asia/Singapore (Singapore, SGT)"),
    ("Asia/Seoul", "Asia/Seoul (South Korea, KST)"),
    ("Asia/Taipei", "Asia/Taipei (Taiwan, CST)"),
    ("Asia/Bangkok", "Asia/Bangkok (Thailand, ICT)"),
    ("Asia/Jakarta", "Asia/Jakarta (Indonesia, WIB)"),
    ("Asia/Kuala_Lumpur", "Asia/Kuala_Lumpur (Malaysia, MYT)"),
    ("Asia/Manila", "Asia/Manila (Philippines, PST)"),
    ("Asia/Kolkata", "Asia/Kolkata (India, IST)"),
    ("Asia/Dubai", "Asia/Dubai (UAE, GST)"),
    ("Asia/Riyadh", "Asia/Riyadh (Saudi Arabia, AST)"),
    ("Asia/Jerusalem", "Asia/Jerusalem (Israel, IST/IDT)"),
    # Australia & Pacific
    ("Australia/Sydney", "Australia/Sydney (AEST/AEDT)"),
    ("Australia/Melbourne", "Australia/Melbourne (AEST/AEDT)"),
    ("Australia/Brisbane", "Australia/Brisbane (AEST)"),
    ("Australia/Perth", "Australia/Perth (AWST)"),
    ("Pacific/Auckland", "Pacific/Auckland (New Zealand, NZST/NZDT)"),
    ("Pacific/Fiji", "Pacific/Fiji (FJT/FJST)"),
    ("Pacific/Honolulu", "Pacific/Honolulu (Hawaii, HST)"),
    # Africa
    ("Africa/Cairo", "Africa/Cairo (Egypt, EET)"),
    ("Africa/Johannesburg", "Africa/Johannesburg (South Africa, SAST)"),
    ("Africa/Lagos", "Africa/Lagos (Nigeria, WAT)"),
    ("Africa/Nairobi", "Africa/Nairobi (Kenya, EAT)"),
    # UTC
    ("UTC", "UTC (Coordinated Universal Time)"),
)


def timezone_label(zone: str) -> str:
    """Return the catalogue label for a zone, or the zone itself if unlisted."""
    for value, label in BUSINESS_TIMEZONES:
        if value == zone:
            return label
    return zone
