"""Operating-system, file and locale queries.

Every query returns TeX-ready text, or an empty string when the
information is unavailable. File queries are gated by a PermissionPolicy.

Python 3.13+.
"""

from .files import (
    file_date,
    file_path,
    file_size,
    file_uri,
    filter_files,
    list_files,
    parent_path,
    resolve_file,
    walk_files,
)
from .locale_data import (
    codeset,
    date_time_fields,
    locale_data,
    locale_id,
    locale_tag,
    numeric,
    resolve_locale,
)
from .permissions import PermissionPolicy
from .system import (
    cwd,
    from_tex_path,
    os_arch,
    os_name,
    os_version,
    pdf_date,
    pdf_now,
    tmp_dir,
    to_tex_path,
    user_home,
)

__all__ = [
    "PermissionPolicy",
    "codeset",
    "cwd",
    "date_time_fields",
    "file_date",
    "file_path",
    "file_size",
    "file_uri",
    "filter_files",
    "from_tex_path",
    "list_files",
    "locale_data",
    "locale_id",
    "locale_tag",
    "numeric",
    "os_arch",
    "os_name",
    "os_version",
    "parent_path",
    "pdf_date",
    "pdf_now",
    "resolve_file",
    "resolve_locale",
    "tmp_dir",
    "to_tex_path",
    "user_home",
    "walk_files",
]
