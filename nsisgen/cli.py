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

"""Command-line interface for nsisgen.

Commands:

    validate: Check a config file without reading the source tree
    generate: Write an .nsi installer script from a config file

Example:
    Validate a config:
        ```bash
        $ nsis-gen validate installer.yaml
        ```

    Generate the script next to the configured installer path:
        ```bash
        $ nsis-gen generate installer.yaml
        ```

    Override the source directory and sort entries by name:
        ```bash
        $ nsis-gen generate installer.yaml --src-dir build/app --sort-entries
        ```

Exit Codes:

- 0: Success
- 1: Error (configuration, filesystem, or validation failure)

Note:
    The CLI only wraps the library; it never invokes makensis.
"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys
from typing import Any

from nsisgen.core import generate_script
from nsisgen.exceptions import ConfigError, FilesystemError, NsisGenError
from nsisgen.logging import get_logger, set_global_logger
from nsisgen.validation import validate_config


def _package_version() -> str:
    try:
        return version("nsisgen")
    except PackageNotFoundError:
        from nsisgen import __version__

        return __version__


def _collect_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Build config overrides from CLI flags; paths resolve against the cwd."""
    return {
        "src_dir": str(Path(args.src_dir).resolve()) if args.src_dir else None,
        "output": str(Path(args.output).resolve()) if args.output else None,
        "compression": args.compression,
        "solid": True if args.solid else None,
        "sort_entries": True if args.sort_entries else None,
    }


def cmd_validate(args: argparse.Namespace) -> int:
    """Handler for 'nsis-gen validate' command.

    Args:
        args: Parsed command-line arguments containing the config path and
            verbose flag.

    Returns:
        Exit code (0 for valid config, 1 for invalid).
    """
    set_global_logger(get_logger(verbose=args.verbose, debug=False))

    config_path = Path(args.config).resolve()

    print(f"Validating config: {config_path}")
    print()

    result = validate_config(config_path)

    print("=" * 70)
    print("VALIDATION RESULTS")
    print("=" * 70)
    print(f"Config:      {result.config_path}")
    print(f"Status:      {result.status.upper()}")
    print()

    if result.warnings:
        print(f"Warnings ({len(result.warnings)}):")
        for warning in result.warnings:
            print(f"  [WARNING] {warning}")
        print()

    if result.errors:
        print(f"Errors ({len(result.errors)}):")
        for error in result.errors:
            print(f"  [X] {error}")
        print()

    print("=" * 70)

    if result.status == "valid":
        print()
        print("[SUCCESS] Config is valid!")
        return 0

    print()
    print(f"[FAILED] Config validation failed with {len(result.errors)} error(s).")
    return 1


def cmd_generate(args: argparse.Namespace) -> int:
    """Handler for 'nsis-gen generate' command.

    Loads the config, walks the source directory and writes the .nsi
    script. Nothing is written if any step fails.

    Args:
        args: Parsed command-line arguments containing the config path,
            script path, option overrides and verbosity flags.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    set_global_logger(get_logger(verbose=args.verbose, debug=args.debug))

    config_path = Path(args.config).resolve()
    script_path = Path(args.script).resolve() if args.script else None

    print(f"Generating installer script from: {config_path}")
    print()

    try:
        result = generate_script(
            config_path,
            script_path,
            overrides=_collect_overrides(args),
        )
    except (ConfigError, FilesystemError) as err:
        print(f"Error: {err}")
        if args.verbose or args.debug:
            import traceback

            traceback.print_exc()
        return 1
    except NsisGenError as err:
        print(f"Error: {err}")
        if args.verbose or args.debug:
            import traceback

            traceback.print_exc()
        return 1

    print("=" * 70)
    print("GENERATION RESULTS")
    print("=" * 70)
    print(f"App Name:        {result.app_name}")
    print(f"Version:         {result.fixed_version}")
    print(f"Installer:       {result.output_path}")
    print(f"Script:          {result.script_path}")
    print(f"Directives:      {result.directive_count}")
    print(f"Files:           {result.file_count}")
    print(f"Status:          {result.status}")
    print("=" * 70)
    print()
    print("[SUCCESS] Installer script generated successfully!")

    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands registered."""
    parser = argparse.ArgumentParser(
        prog="nsis-gen",
        description="nsisgen - generate NSIS installer scripts from a directory tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"nsis-gen {_package_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'validate' command
    parser_validate = subparsers.add_parser(
        "validate",
        help="Validate a config file (no tree walk, nothing written)",
        description="Check a config file for missing or invalid options.",
    )
    parser_validate.add_argument(
        "config",
        help="Path to the YAML config file",
    )
    parser_validate.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show validation progress and details",
    )
    parser_validate.set_defaults(func=cmd_validate)

    # 'generate' command
    parser_generate = subparsers.add_parser(
        "generate",
        help="Generate an .nsi script from a config file",
        description="Walk the source directory and write a complete NSIS script.",
    )
    parser_generate.add_argument(
        "config",
        help="Path to the YAML config file",
    )
    parser_generate.add_argument(
        "--script",
        default=None,
        help="Where to write the .nsi script (default: output path with .nsi suffix)",
    )
    parser_generate.add_argument(
        "--src-dir",
        default=None,
        help="Override the directory to package",
    )
    parser_generate.add_argument(
        "--output",
        default=None,
        help="Override the installer executable path",
    )
    parser_generate.add_argument(
        "--compression",
        choices=["zlib", "bzip2", "lzma"],
        default=None,
        help="Override the compressor (default: from config or lzma)",
    )
    parser_generate.add_argument(
        "--solid",
        action="store_true",
        help="Use solid compression",
    )
    parser_generate.add_argument(
        "--sort-entries",
        action="store_true",
        help="Sort directory entries by name for reproducible output",
    )
    parser_generate.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser_generate.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )
    parser_generate.set_defaults(func=cmd_generate)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the nsis-gen CLI.

    This function is registered as the 'nsis-gen' console script in
    pyproject.toml.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
