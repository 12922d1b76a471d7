"""User-facing strings for the student screens."""

NIK_LENGTH = "NIK harus 16 digit!"
NIK_DIGITS = "NIK hanya boleh angka!"
DUPLICATE_NIK = "NIK sudah digunakan!"

NISN_LENGTH = "NISN harus 10 digit!"
NISN_DIGITS = "NISN hanya boleh angka!"
DUPLICATE_NISN = "NISN sudah digunakan!"

NAMA_TOO_LONG = "Nama maksimal 100 karakter!"
TINGKAT_INVALID = "Tingkat tidak valid!"
ROMBEL_TOO_LONG = "Rombel maksimal 50 karakter!"
TERDAFTAR_INVALID = "Status terdaftar tidak valid!"

TGL_MASUK_REQUIRED = "Tanggal masuk wajib diisi!"
TGL_MASUK_INVALID = "Format tanggal masuk tidak valid!"
TGL_MASUK_PAST_CUTOFF = "Tanggal masuk lewat batas!"
TGL_MASUK_EDIT_PAST_CUTOFF = "Tanggal masuk tidak boleh melebihi batas!"

NOT_FOUND = "Data siswa tidak ditemukan!"

CREATED = "Siswa berhasil ditambahkan!"
UPDATED = "Data siswa berhasil diupdate!"
DELETED = "Siswa berhasil dihapus!"
