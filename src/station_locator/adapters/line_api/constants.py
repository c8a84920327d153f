"""Constants for LINE message templates."""

ALT_TEXT = "Nearby stations"
STANDARD_STATION_LABEL = "GoStation®"
SUPER_STATION_LABEL = "Super GoStation®"
ADDRESS_LABEL = "Address"
DISTANCE_LABEL = "Distance"
NAVIGATE_LABEL = "Navigate"
DIRECTIONS_URL = "https://www.google.com.tw/maps/dir//{latitude:f},{longitude:f}"

LABEL_COLOR = "#aaaaaa"
VALUE_COLOR = "#666666"
SUBTITLE_COLOR = "#999999"
