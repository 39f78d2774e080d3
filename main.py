import logging
import sys

from graphpath.config import load_config
from graphpath.simulation import run_simulation

if __name__ == "__main__":
    path = sys.argv[1] if len(sys.argv) > 1 else "config/example_config.yaml"
    config = load_config(path)
    logging.basicConfig(level=config.get("log_level", "WARNING"),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    result = run_simulation(config)
    sys.exit(0 if result.path else 1)
