# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Section assemblers for the generated .nsi script.

Each function returns one self-contained block of script text: a DIVIDER
line, a comment naming the section, another DIVIDER, a blank line and the
section body. The composer concatenates them in a fixed order:

1. General: product name, OutFile, InstallDir, compressor, UI style
2. Resources: VIProductVersion and the VIAddVersionKey entries
3. Install: packaging directives between Section -Install / SectionEnd
4. Uninstall: remove everything under $INSTDIR, then $INSTDIR itself

Later sections rely on names the earlier ones establish ($INSTDIR is set
by InstallDir), so the order is part of the output contract.

All values interpolated into quoted strings go through escape_nsis(), so
a "$" or a double quote in metadata or a file name cannot break the script.
"""

from __future__ import annotations

from collections.abc import Sequence

from nsisgen.exceptions import ConfigError
from nsisgen.logging import get_global_logger
from nsisgen.options import ComposerOptions
from nsisgen.script.syntax import escape_nsis, quote_nsis, to_absolute_windows_path
from nsisgen.script.tree import Directive, walk_directives

__all__ = [
    "DIVIDER",
    "make_banner",
    "make_general_section",
    "make_resources_section",
    "make_install_section",
    "make_uninstall_section",
]

DIVIDER = "#" * 80


def _section(title: str, body: Sequence[str]) -> str:
    header = [DIVIDER, "#", f"# {title}", "#", DIVIDER, ""]
    return "\n".join([*header, *body]) + "\n"


def make_banner() -> str:
    """Return the banner comment that opens every generated script."""
    return "\n".join([DIVIDER, "#", "# Generated by nsis-gen.", "#", DIVIDER]) + "\n"


def make_general_section(options: ComposerOptions) -> str:
    """Return the General section.

    Declares Name, Caption and BrandingText (all the application name),
    OutFile as an absolute Windows path, InstallDir under $PROGRAMFILES,
    the compressor (with /SOLID when requested) and XPStyle on.
    """
    name = quote_nsis(options.app_name)
    compressor = options.compression.value
    if options.solid:
        compressor = f"/SOLID {compressor}"

    return _section(
        "General",
        [
            f"Name {name}",
            f"Caption {name}",
            f"BrandingText {name}",
            f"OutFile {quote_nsis(to_absolute_windows_path(options.output))}",
            f'InstallDir "$PROGRAMFILES\\{escape_nsis(options.app_name)}"',
            f"SetCompressor {compressor}",
            "XPStyle on",
        ],
    )


def make_resources_section(options: ComposerOptions) -> str:
    """Return the Resources section (version information resource)."""
    version = quote_nsis(options.fixed_version)
    return _section(
        "Resources",
        [
            f"VIProductVersion {version}",
            f'VIAddVersionKey "ProductName" {quote_nsis(options.app_name)}',
            f'VIAddVersionKey "CompanyName" {quote_nsis(options.company_name)}',
            f'VIAddVersionKey "FileDescription" {quote_nsis(options.description)}',
            f'VIAddVersionKey "FileVersion" {version}',
            f'VIAddVersionKey "LegalCopyright" {quote_nsis(options.copyright)}',
        ],
    )


def make_install_section(
    options: ComposerOptions, directives: Sequence[Directive] | None = None
) -> str:
    """Return the Install section.

    Args:
        options: Normalized options; src_dir must be set.
        directives: Pre-computed directives. When None, src_dir is walked.

    Returns:
        Section text wrapping the directives between the fixed setup lines
        and WriteUninstaller.

    Raises:
        ConfigError: If options.src_dir is not set. Raised before any
            filesystem access.
        FilesystemError: If walking src_dir fails.
    """
    if options.src_dir is None:
        raise ConfigError(
            "No source directory configured; set src_dir to package files"
        )

    if directives is None:
        directives = walk_directives(options.src_dir, sort_entries=options.sort_entries)

    get_global_logger().verbose(
        "SECTION", f"Install section holds {len(directives)} directive(s)"
    )

    body = [
        "Section -Install",
        "",
        "SetShellVarContext current",
        "SetOverwrite ifnewer",
        "",
    ]
    if directives:
        body.extend(d.render() for d in directives)
        body.append("")
    body.extend(
        [
            'WriteUninstaller "$INSTDIR\\uninstall.exe"',
            "",
            "SectionEnd",
        ]
    )
    return _section("Main", body)


def make_uninstall_section() -> str:
    """Return the Uninstall section, which removes the whole install root."""
    return _section(
        "Uninstall",
        [
            "Section Uninstall",
            "",
            'RMDir /r "$INSTDIR\\*.*"',
            'RMDir "$INSTDIR"',
            "",
            "SectionEnd",
        ],
    )
