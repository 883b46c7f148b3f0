from .file_handling import (
    load_from_file,
    loadcsv,
    loadtxt,
    read_narray,
    save_narray,
    save_to_file,
    savecsv,
    savetxt,
)

__all__ = [
    "load_from_file",
    "loadcsv",
    "loadtxt",
    "read_narray",
    "save_narray",
    "save_to_file",
    "savecsv",
    "savetxt",
]
