"""
Command line arguments and configuration with singleton pattern.

Provides a centralized configuration accessible via direct attribute access.
Supports both command line arguments and config file values.

Config File Format:
    JSON format with simple key-value pairs.

    Example readme_regen.json:
    {
        "log_level": "DEBUG",
        "generator": "cargo readme",
        "root_project": "crates/rune"
    }

Example usage:
    from utils.Args import Args

    Args.initialize()

    manifest = Args.manifest  # From --manifest, config file, or defaults

Note: Priority order (highest to lowest):
    1. Command line arguments (from Typer)
    2. Config file values
    3. Default values (from defaults dict)
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer


class ArgsMeta(type):
    """Metaclass to provide direct attribute access to config values."""

    def __getattr__(cls, name: str):
        if name.startswith("__"):
            raise AttributeError(name)
        if not cls._initialized:
            raise RuntimeError("Args has not been initialized. Call Args.initialize() first.")

        if name in cls._config:
            return cls._config[name]

        raise AttributeError(f"Config item '{name}' not found")


class Args(metaclass=ArgsMeta):
    """Args class providing direct attribute access to configuration."""

    _defaults: Dict[str, Any] = {
        "config_file": None,
        "log_level": "INFO",
        "log_color": False,
        "log_file": None,  # None = no log file
        "workspace_root": ".",  # cwd of every generator invocation
        "manifest": "Cargo.toml",  # relative to workspace_root
        "members_key": "workspace.members",
        "generator": "cargo readme",
        # -t and -o are resolved by the generator relative to the -r project
        "template": "../../README.tpl",
        "output": "README.md",
        "root_project": "crates/rune",
        "root_output": "../../README.md",
        "dry_run": False,
    }

    _config: Dict[str, Any] = {}
    _initialized: bool = False
    _parsed_args: Dict[str, Any] = {}

    @classmethod
    def initialize(cls, config_file: Optional[Path] = None) -> None:
        """
        Initialize configuration from defaults, config file, and command line args.

        Args:
            config_file: Optional path to config file. If None, uses --config
                from the command line, or no config file at all.
        """
        if cls._initialized:
            return

        cls._config = dict(cls._defaults)

        parsed_args = cls._parse_command_line()

        config_path = config_file or parsed_args.get("config")
        if config_path:
            config_path = Path(config_path)
            if config_path.exists():
                cls._load_config_file(config_path)
            else:
                print(f"Warning: Config file '{config_path}' not found. Using defaults and command line arguments only.",
                      file=sys.stderr)

        cls._apply_command_line_args(parsed_args)

        if cls._config.get("config") is not None:
            cls._config["config_file"] = str(cls._config["config"])
        elif config_file is not None:
            cls._config["config_file"] = str(config_file)

        cls._initialized = True

    @classmethod
    def _parse_command_line(cls) -> Dict[str, Any]:
        """
        Parse command line arguments using Typer.

        Returns:
            Dictionary of the command line arguments that were actually given
        """
        parsed_values: Dict[str, Any] = {}
        invoked = []

        def callback(
            config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to configuration file (JSON format)"),
            log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Set the logging level", case_sensitive=False),
            log_file: Optional[Path] = typer.Option(None, "--log-file", help="Append log output to this file"),
            log_color: bool = typer.Option(False, "--log-color", help="Color the log severity in terminal. Only applies when stderr is a TTY."),
            workspace_root: Optional[Path] = typer.Option(None, "--workspace-root", "-w", help="Workspace root; the generator runs here"),
            manifest: Optional[Path] = typer.Option(None, "--manifest", "-m", help="Workspace manifest, relative to the workspace root. Default: Cargo.toml"),
            members_key: Optional[str] = typer.Option(None, "--members-key", help="Dotted path of the member list in the manifest. Default: workspace.members"),
            generator: Optional[str] = typer.Option(None, "--generator", "-g", help="Generator command, e.g. 'cargo readme'"),
            template: Optional[str] = typer.Option(None, "--template", "-t", help="Template path passed to the generator"),
            output: Optional[str] = typer.Option(None, "--output", "-o", help="Output filename for each workspace member"),
            root_project: Optional[str] = typer.Option(None, "--root-project", help="Project used for the final workspace README"),
            root_output: Optional[str] = typer.Option(None, "--root-output", help="Output path of the final workspace README"),
            dry_run: bool = typer.Option(False, "--dry-run", help="Log the generator commands instead of running them"),
        ) -> None:
            """Regenerate the README of every workspace member, then the workspace README."""
            invoked.append(True)
            if config is not None:
                parsed_values["config"] = config
            if log_level is not None:
                parsed_values["log_level"] = log_level.upper()
            if log_file is not None:
                parsed_values["log_file"] = str(log_file)
            if log_color:
                parsed_values["log_color"] = True
            if workspace_root is not None:
                parsed_values["workspace_root"] = str(workspace_root)
            if manifest is not None:
                parsed_values["manifest"] = str(manifest)
            if members_key is not None:
                parsed_values["members_key"] = members_key
            if generator is not None:
                parsed_values["generator"] = generator
            if template is not None:
                parsed_values["template"] = template
            if output is not None:
                parsed_values["output"] = output
            if root_project is not None:
                parsed_values["root_project"] = root_project
            if root_output is not None:
                parsed_values["root_output"] = root_output
            if dry_run:
                parsed_values["dry_run"] = True

        app = typer.Typer(help="Regenerate README files across a workspace")
        app.command()(callback)

        app(sys.argv[1:], standalone_mode=False)

        # --help prints usage without invoking the callback
        if not invoked:
            sys.exit(0)

        return parsed_values

    @classmethod
    def _load_config_file(cls, config_path: Path) -> None:
        """
        Load configuration from JSON file and merge into config.

        Args:
            config_path: Path to the JSON config file
        """
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_file_data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file '{config_path}': {e}")
        except Exception as e:
            raise IOError(f"Error reading config file '{config_path}': {e}")
        if not isinstance(config_file_data, dict):
            raise ValueError(f"Config file '{config_path}' must contain a JSON object")
        # "false" as a string would be truthy
        for key, value in config_file_data.items():
            if isinstance(cls._defaults.get(key), bool) and not isinstance(value, bool):
                raise ValueError(
                    f"Config item '{key}' in '{config_path}' must be true or false, got {value!r}"
                )
        cls._config.update(config_file_data)

    @classmethod
    def _apply_command_line_args(cls, parsed_args: Dict[str, Any]) -> None:
        """Apply command line values, overriding file values and defaults."""
        cls._parsed_args = parsed_args
        for key, value in parsed_args.items():
            if value is not None:
                cls._config[key] = value

    @classmethod
    def get_args(cls) -> Dict[str, Any]:
        """
        Get the parsed command line arguments.

        Returns:
            Dictionary containing all command line arguments that were provided
        """
        if not cls._initialized:
            raise RuntimeError("Args has not been initialized. Call Args.initialize() first.")
        return cls._parsed_args.copy()

    @classmethod
    def get_config(cls) -> Dict[str, Any]:
        """
        Get the full configuration dictionary.

        Returns:
            Dictionary containing all configuration values
        """
        if not cls._initialized:
            raise RuntimeError("Args has not been initialized. Call Args.initialize() first.")
        return cls._config.copy()
