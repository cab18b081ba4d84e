"""JHU CSSE time-series column layout."""

PROVINCE_COL = "Province/State"
COUNTRY_COL = "Country/Region"
LAT_COL = "Lat"
LONG_COL = "Long"

WIDE_ID_COLUMNS = [PROVINCE_COL, COUNTRY_COL, LAT_COL, LONG_COL]
GEO_COLUMNS = [LAT_COL, LONG_COL]

RENAME_MAP = {
    PROVINCE_COL: "province",
    COUNTRY_COL: "country",
}

JOIN_KEYS = ["province", "country", "date"]
COUNTRY_DAY_KEYS = ["country", "date"]

SOURCE_METRICS = ("confirmed", "deaths", "recovered")
