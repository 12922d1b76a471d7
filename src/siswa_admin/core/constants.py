"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

DEFAULT_SESSION_MINUTES = 60
DEFAULT_TGL_MASUK_CUTOFF = date(2025, 11, 26)
DEFAULT_DISPLAY_NAME = "Admin"

NIK_LENGTH = 16
NISN_LENGTH = 10

# MySQL ER_DUP_ENTRY
MYSQL_DUPLICATE_KEY = 1062

# column sizes in database/schema.sql
NAMA_MAX_LENGTH = 100
ROMBEL_MAX_LENGTH = 50

TINGKAT_CHOICES = ("X", "XI", "XII")
TERDAFTAR_CHOICES = ("Aktif", "Tidak Aktif")
