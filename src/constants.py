"""Constants used throughout the project"""

# PAGASA public file repository (Climatology and Agrometeorology Division)
DEFAULT_INDEX_URL = "https://pubfiles.pagasa.dost.gov.ph/pagasaweb/files/cad/"

# Data directory
DATA_DIR = "data-raw"
CLIMATE_SUBDIR = "climate"

# Bucket for PDFs whose URL carries no 4-digit year
UNKNOWN_YEAR = "unknown"

# Network
DOWNLOAD_CHUNK_SIZE = 8192  # Bytes for file downloads
REQUEST_TIMEOUT = 60  # Seconds per request

# Default values for CLI (only place defaults are allowed)
DEFAULT_CONCURRENT = 1
