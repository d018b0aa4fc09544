"""File name extraction from URLs and paths."""

KNOWN_EXTENSIONS = frozenset(
    {
        "txt", "md", "rtf", "tex", "doc", "docx", "odt", "ott", "pdf", "djvu", "epub",
        "mobi", "azw", "azw3", "xls", "xlsx", "ods", "csv", "tsv", "ppt", "pptx",
        "odp", "pps", "bib", "log", "jpg", "jpeg", "png", "gif", "bmp", "tif", "tiff",
        "webp", "svg", "ico", "heif", "heic", "raw", "cr2", "nef", "orf", "sr2", "dng",
        "dds", "psd", "exr", "xcf", "ai", "eps", "cdr", "indd", "mp3", "wav", "ogg",
        "flac", "aac", "m4a", "wma", "alac", "aiff", "amr", "mid", "midi", "opus",
        "au", "caf", "ape", "mp4", "mkv", "avi", "mov", "flv", "wmv", "webm", "mpeg",
        "mpg", "3gp", "3g2", "m4v", "ts", "mts", "asf", "rm", "rmvb", "vob", "f4v",
        "ogv", "m2ts", "mod", "dav", "zip", "rar", "7z", "tar", "gz", "bz2", "xz",
        "tgz", "tbz2", "txz", "lz", "lzma", "z", "cab", "arj", "ace", "iso", "dmg",
        "rpm", "deb", "pkg", "apk", "jar", "img", "vhd", "vmdk", "qcow2", "sql", "db",
        "dbf", "mdb", "accdb", "json", "xml", "yaml", "yml", "toml", "ini", "plist",
        "pkl", "msgpack", "h5", "hdf5", "parquet", "avro", "orc", "ndjson", "pdb",
        "sqlite", "sqlite3", "dbx", "sdf", "js", "jsx", "tsx", "c", "cpp", "h", "hpp",
        "java", "py", "rb", "go", "rs", "php", "pl", "sh", "bat", "cmd", "ps1", "lua",
        "swift", "kt", "scala", "cs", "vb", "dart", "m", "r", "jl", "fs", "vbproj",
        "sln", "pri", "makefile", "html", "htm", "xhtml", "css", "scss", "sass",
        "less", "xlf", "po", "pot", "jsp", "asp", "aspx", "jspf", "cgi", "cfm", "env",
        "conf", "config", "cfg", "dockerfile", "gitignore", "gitconfig",
        "gitattributes", "npmignore", "lock", "gradle", "pom", "prettierrc",
        "eslintrc", "babelrc", "editorconfig", "ttf", "otf", "woff", "woff2", "eot",
        "dwg", "dxf", "shp", "kml", "kmz", "gpx", "stl", "step", "iges", "3ds", "3dm",
        "fbx", "obj", "exe", "msi", "bin", "run", "com", "app", "elf", "dll", "so",
        "dylib", "sys", "pem", "crt", "cer", "key", "der", "csr", "p12", "pfx", "jks",
        "cue", "nes", "sfc", "gba", "nds", "sav", "rom", "pak", "vpk", "bik", "fb2",
        "lit", "lrf", "cbr", "cbz", "cbt", "cba", "opds", "fasta", "fa", "fas", "ffn",
        "faa", "fna", "frn", "fastq", "fq", "gb", "gbk", "sam", "bam", "vcf", "gff",
        "bed", "bak", "tmp", "old", "backup", "swp", "part", "crdownload", "torrent",
        "ics", "ical", "calendar", "srt", "sub", "idx", "cdf", "hdf", "nc", "grib",
        "fits", "netcdf", "vtk", "xmind", "drawio", "war", "ear", "crx", "xpi",
        "plugin", "vsix", "safariextz",
    }
)
DOUBLE_EXTENSIONS = ("tar.gz", "tar.bz2", "tar.xz", "tar.lz", "tar.lzma", "tar.z", "tar.zst")


def extract_file_name(url: str | None) -> str | None:
    """Return the last path segment of ``url`` without its known extensions.

    A known double extension (``.tar.gz``) is removed as a whole; otherwise
    known single extensions are peeled off one at a time, so
    ``"report.pdf.zip"`` becomes ``"report"``. Unknown extensions stop the
    peeling.

    Returns:
        str | None: The bare file name, ``""`` when ``url`` ends with a
        slash, None for non-string or blank input.

    Examples:
        >>> extract_file_name("https://cdn.example.com/files/archive.tar.gz")
        'archive'
        >>> extract_file_name("/images/photo.final.JPG")
        'photo.final'
    """
    if not isinstance(url, str) or not url.strip():
        return None
    file_name = url.rsplit("/", 1)[-1]
    if not file_name:
        return ""

    lowered = file_name.lower()
    for extension in DOUBLE_EXTENSIONS:
        if lowered.endswith(f".{extension}"):
            return file_name[: -len(extension) - 1]

    while "." in file_name:
        stem, _, extension = file_name.rpartition(".")
        if extension.lower() not in KNOWN_EXTENSIONS:
            break
        file_name = stem
    return file_name
