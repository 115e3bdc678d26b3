KB = 1024
MB = 1024 * 1024


def format_file_size(size: int) -> str:
    """Binary units, one decimal place: ``512 B``, ``1.5 KB``, ``2.4 MB``."""
    if size < KB:
        return f"{size} B"
    if size < MB:
        return f"{size / KB:.1f} KB"
    return f"{size / MB:.1f} MB"


def format_size_limit(size: int) -> str:
    """Whole mebibyte limits read ``100MB``; anything else uses ``format_file_size``."""
    if size >= MB and size % MB == 0:
        return f"{size // MB}MB"
    return format_file_size(size)
