"""
Indonesian Lexicon Tables

Hardcoded word lists used for query understanding. Pure data, no behavior.

Tables:
- PHONETIC_VARIANTS: canonical term -> common misspellings (typo correction)
- SYNONYMS: informal/slang form -> normalized form
- SEMANTIC_MAP: term -> related terms (query expansion for retrieval)
- PHRASE_PATTERNS: ordered multi-token patterns -> (intent, boost)
- STOP_WORDS: function words and generic query words
- ENTITY_KEYWORDS: entity flag -> trigger words
- PACKAGE_VOCABULARY: words that make a query package-related
- PACKAGE_TIERS: tier name -> words that mention it
- KNOWN_WORDS: everyday words that typo correction must leave alone
"""

# =============================================================================
# TYPO CORRECTION — canonical term → misspellings
# Every key is also a canonical target for edit-distance correction, so
# frequent correct words are listed (with no variants) to keep them stable.
# =============================================================================
PHONETIC_VARIANTS = {
    "umroh": ["omroh", "umro", "umrokh", "unroh", "umrho", "omrah"],
    "haji": ["haj", "hajji", "hji"],
    "syarat": ["syrat", "sarat", "siarat", "persyaratan", "syarad"],
    "paket": ["pakit", "pake", "pket", "pakett", "packet"],
    "vip": ["vif", "fip", "vipp"],
    "reguler": ["regerul", "regler", "regular", "reguller"],
    "eksklusif": ["ekslusif", "exclusive", "eksklusive", "exklusif"],
    "manasik": ["nasik", "mansik", "manasek"],
    "kantor": ["kanter", "kntr", "kantr"],
    "alamat": ["lamat", "lmmat", "almat"],
    "harga": ["hrga", "hargaa"],
    "biaya": ["biyaya", "biaya2", "biyaa"],
    "bayar": ["byar", "bayr"],
    "daftar": ["dafter", "daptar", "dftar"],
    "kontak": ["kontek", "contact", "kontakk"],
    "jadwal": ["jadual", "jdwal", "jadwl"],
    "keberangkatan": ["keberangktan", "kebrangkatan"],
    "hotel": ["hotell", "hotl"],
    "hari": ["hr"],
    "visa": ["fisa", "viza"],
    "tiket": ["tikek", "ticket"],
    "cicilan": ["cicil", "cicilannya"],
    "promo": ["promosi", "prmo"],
    "fasilitas": ["fasilitasnya", "fasilitass", "facilities"],
    "layanan": ["layananan", "lyanan"],
    "lokasi": ["lokasinya", "lokas"],
    "telepon": ["tlp", "telpon"],
    "cirebon": ["crebon", "cirbon", "crb"],
    "bimbingan": ["bimbngan", "bimbingn"],
}

# =============================================================================
# SYNONYMS — informal/slang → normalized form (applied before typo correction)
# =============================================================================
SYNONYMS = {
    "pengen": "mau",
    "pingin": "mau",
    "pengin": "mau",
    "ingin": "mau",
    "gmn": "gimana",
    "gimna": "gimana",
    "bgmn": "bagaimana",
    "brp": "berapa",
    "brapa": "berapa",
    "hrg": "harga",
    "harganya": "harga",
    "biayanya": "biaya",
    "byr": "bayar",
    "alamatnya": "alamat",
    "kantornya": "kantor",
    "nomer": "nomor",
    "no": "nomor",
    "nomornya": "nomor",
    "telp": "telepon",
    "telfon": "telepon",
    "tlpn": "telepon",
    "whatsapp": "wa",
    "watsap": "wa",
    "umrah": "umroh",
    "umra": "umroh",
    "dmn": "dimana",
    "dimn": "dimana",
    "mana": "dimana",
    "gk": "tidak",
    "ga": "tidak",
    "gak": "tidak",
    "nggak": "tidak",
    "sy": "saya",
    "aku": "saya",
    "daftarnya": "daftar",
    "pendaftaran": "daftar",
    "registrasi": "daftar",
    "book": "booking",
    "dipesan": "pesan",
    "mesen": "pesan",
    "murmer": "murah",
    "ekonomis": "hemat",
    "premium": "vip",
    "bedanya": "beda",
    "perbedaan": "beda",
    "bandingin": "bandingkan",
    "versus": "vs",
    "hai": "halo",
    "hi": "halo",
    "hallo": "halo",
    "hello": "halo",
}

# =============================================================================
# SEMANTIC EXPANSION — term → related terms (retrieval only)
# =============================================================================
SEMANTIC_MAP = {
    "syarat": ["dokumen", "berkas", "paspor", "akta", "nikah", "ktp", "vaksin"],
    "biaya": ["harga", "tarif", "bayar", "mahal", "murah"],
    "harga": ["biaya", "tarif", "juta"],
    "lokasi": ["alamat", "kantor", "dimana", "maps", "cirebon", "mundu"],
    "dimana": ["alamat", "kantor", "lokasi"],
    "layanan": ["fasilitas", "fitur", "sarana", "servis", "keunggulan"],
    "kontak": ["hubungi", "wa", "nomor", "telepon", "admin", "cs"],
    "daftar": ["pendaftaran", "registrasi", "syarat", "booking"],
    "murah": ["hemat", "ekonomis", "promo", "terjangkau", "reguler"],
    "eksklusif": ["mewah", "premium", "business", "vip"],
    "manasik": ["bimbingan", "pembimbing", "latihan", "ustadz"],
    "bayar": ["cicilan", "dp", "transfer", "pembayaran"],
    "jadwal": ["keberangkatan", "berangkat", "tanggal", "bulan"],
    "legal": ["resmi", "izin", "ppiu", "kemenag"],
}

# =============================================================================
# PHRASE PATTERNS — ordered token sequences → (intent, boost)
# Matched against the final (stop-word free) token sequence.
# =============================================================================
PHRASE_PATTERNS = [
    (("harga", "paket"), "pricing", 20),
    (("biaya", "paket"), "pricing", 20),
    (("biaya", "umroh"), "pricing", 20),
    (("harga", "umroh"), "pricing", 20),
    (("paket", "murah"), "budget_package", 20),
    (("paket", "hemat"), "budget_package", 20),
    (("paket", "reguler"), "budget_package", 15),
    (("paket", "vip"), "premium_package", 25),
    (("paket", "eksklusif"), "premium_package", 25),
    (("nomor", "wa"), "contact", 25),
    (("nomor", "telepon"), "contact", 25),
    (("hubungi", "admin"), "contact", 20),
    (("alamat", "kantor"), "location", 25),
    (("lokasi", "kantor"), "location", 25),
    (("kantor", "dimana"), "location", 20),
    (("cara", "daftar"), "registration", 20),
    (("syarat", "daftar"), "registration", 20),
    (("syarat", "umroh"), "registration", 15),
    (("mau", "daftar"), "registration", 20),
    (("mau", "umroh"), "registration", 15),
]

# =============================================================================
# STOP WORDS
# =============================================================================
STOP_WORDS = frozenset({
    # Function words
    "yang", "di", "ke", "dari", "dan", "atau", "pada", "dengan",
    "untuk", "karena", "oleh", "itu", "ini", "adalah", "bagi",
    "seperti", "dalam", "setelah", "sebelum", "juga", "saja", "aja",
    # Question words
    "siapa", "apa", "kapan", "bagaimana", "berapa", "kenapa", "mengapa",
    "apakah", "gimana",
    # Generic query words / chat filler
    "mencari", "cari", "tentang", "info", "informasi", "ada", "bisa", "dong",
    "saya", "kami", "kita", "anda", "tolong", "mohon", "minta", "kak",
    "min", "gan", "sis", "ya", "yah", "sih", "kah", "nya", "deh", "nih",
    "tidak", "tanya", "nanya", "mas", "mbak", "pak", "bu",
    "harus", "perlu", "sudah", "udah", "belum", "akan", "lagi", "masih",
    "kalau", "kalo", "jika", "boleh",
})

# =============================================================================
# ENTITY KEYWORDS — entity flag → trigger words
# =============================================================================
ENTITY_KEYWORDS = {
    "is_location": frozenset({"cirebon", "mundu", "banjarwangunan", "lokasi", "dimana", "maps"}),
    "is_vip": frozenset({"vip", "premium", "mewah", "eksklusif"}),
    "is_reguler": frozenset({"reguler", "hemat", "murah", "terjangkau", "ekonomis"}),
    "is_legalitas": frozenset({"resmi", "izin", "legal", "legalitas", "ppiu", "kemenag", "terdaftar"}),
    "is_contact": frozenset({"wa", "telepon", "kontak", "hubungi", "admin", "cs", "nomor"}),
    "is_manasik": frozenset({"manasik", "bimbingan", "pembimbing", "mutawif", "ustadz"}),
    "is_urgent": frozenset({"segera", "cepat", "buruan", "sekarang", "secepatnya", "langsung", "kuota", "seat"}),
    "is_pricing": frozenset({"harga", "biaya", "tarif", "bayar", "cicilan", "dp", "juta", "ongkos", "promo", "diskon"}),
    "is_comparison": frozenset({"banding", "bandingkan", "perbandingan", "beda", "vs", "compare", "lebih"}),
}

# =============================================================================
# PACKAGE VOCABULARY — any hit makes the query package-related
# =============================================================================
PACKAGE_VOCABULARY = frozenset({
    "harga", "biaya", "tarif", "paket", "reguler", "vip", "eksklusif",
    "booking", "daftar", "pesan", "promo", "diskon", "murah", "hemat",
    "cicilan", "dp", "seat", "kuota",
})

# =============================================================================
# PACKAGE TIERS — tier → words that mention it (interest tracking, comparison)
# =============================================================================
PACKAGE_TIERS = {
    "reguler": frozenset({"reguler", "hemat", "murah"}),
    "vip": frozenset({"vip", "premium"}),
    "eksklusif": frozenset({"eksklusif", "mewah", "business"}),
}

# =============================================================================
# KNOWN WORDS — correct everyday words within two edits of a canonical term
# ("kota" -> "kontak", "hp" -> "vip", "lama" -> "alamat"). Words from the other
# tables are protected automatically; only list the ones they do not contain.
# =============================================================================
KNOWN_WORDS = frozenset({
    "kota", "lama", "kali", "hati", "mari", "biasa", "pakai",
    "bayi", "total", "hp", "rp", "haha",
})
