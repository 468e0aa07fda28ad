"""
Main entry point for the Registrar platform.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .core.exceptions import ConfigurationError, RegistrarException
from .persistence import Dataset, load_dataset
from .services import QueryEngine
from .api.rest_api import RegistrarRestAPI

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "data.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "data_path": str(DEFAULT_DATA_PATH),
    "host": "0.0.0.0",
    "port": 5000,
    "log_level": "info",
}

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def load_config_file(path: str) -> Dict[str, Any]:
    """Read a JSON configuration file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read configuration file {path}: {e}") from e
    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
    return config


def build_config(file_config: Optional[Mapping[str, Any]] = None,
                 environ: Optional[Mapping[str, str]] = None,
                 overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Merge defaults, config file, environment and command line, in that order."""
    environ = os.environ if environ is None else environ
    config = dict(DEFAULT_CONFIG)
    config.update(file_config or {})
    
    if environ.get("PORT"):
        config["port"] = environ["PORT"]
    if environ.get("REGISTRAR_DATA_PATH"):
        config["data_path"] = environ["REGISTRAR_DATA_PATH"]
    
    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value
    
    try:
        config["port"] = int(config["port"])
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid port: {config['port']!r}") from e
    if not 0 < config["port"] < 65536:
        raise ConfigurationError(f"Port out of range: {config['port']}")
    
    config["log_level"] = str(config["log_level"]).lower()
    if config["log_level"] not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {config['log_level']!r}")
    return config


class RegistrarPlatform:
    """Main platform class: loads the dataset once and wires the API to it."""
    
    def __init__(self, config: Optional[dict] = None, dataset: Optional[Dataset] = None):
        self._config = build_config(config, environ={})
        self._dataset = dataset
        self._engine = None
        self._rest_api = None
        
        # Initialize platform
        self._initialize_platform()
    
    def _initialize_platform(self):
        """Load the dataset and initialize services and the API."""
        print("Initializing Registrar platform...")
        
        if self._dataset is None:
            self._dataset = load_dataset(self._config["data_path"])
            print(f"✓ Dataset loaded: {self._config['data_path']}")
        
        self._engine = QueryEngine(self._dataset)
        print("✓ Query engine initialized")
        
        self._rest_api = RegistrarRestAPI(self._engine)
        print("✓ REST API initialized")
    
    @property
    def config(self) -> Dict[str, Any]:
        return dict(self._config)
    
    @property
    def engine(self) -> QueryEngine:
        return self._engine
    
    @property
    def app(self):
        return self._rest_api.app
    
    def start_rest_server(self):
        """Serve the REST API until interrupted."""
        import uvicorn
        
        host = self._config["host"]
        port = self._config["port"]
        print(f"✓ Server running on port {port}")
        print(f"  - REST API: http://localhost:{port}/api")
        print(f"  - API Docs: http://localhost:{port}/docs")
        uvicorn.run(self.app, host=host, port=port, log_level=self._config["log_level"])
    
    def print_summary(self):
        """Print collection sizes of the loaded dataset."""
        stats = self._engine.get_statistics()
        print("\n=== Dataset ===")
        for name, count in stats["collections"].items():
            print(f"  {name}: {count}")
        print(f"  total records: {stats['records']}")


def main():
    """Main entry point."""
    import argparse
    
    parser = argparse.ArgumentParser(description="Registrar read-only query API")
    parser.add_argument("--host", type=str, help="Interface to bind")
    parser.add_argument("--port", type=int, help="REST server port")
    parser.add_argument("--data", type=str, dest="data_path", help="Dataset JSON file")
    parser.add_argument("--log-level", type=str, choices=LOG_LEVELS, help="Log level")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--check", action="store_true", help="Load the dataset, print a summary and exit")
    
    args = parser.parse_args()
    
    try:
        file_config = load_config_file(args.config) if args.config else {}
        config = build_config(file_config, overrides={
            "host": args.host,
            "port": args.port,
            "data_path": args.data_path,
            "log_level": args.log_level,
        })
        logging.basicConfig(
            level=config["log_level"].upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
        platform = RegistrarPlatform(config)
    except RegistrarException as e:
        print(f"✗ {e.message}")
        raise SystemExit(1)
    
    if args.check:
        platform.print_summary()
        return
    
    try:
        platform.start_rest_server()
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == "__main__":
    main()
