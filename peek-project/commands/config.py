# The command: peek config <key> <value>
# What it does: A user-facing command to set a configuration key-value pair (e.g., display.timestamp_format)
# How it does: It passes the key and value to `write_config` in `utils/config.py`, which validates the key and handles the file I/O
# What data structure it uses: None directly, but it provides the interface to the underlying Map / Dictionary structure managed by `utils/config.py`

import sys
from utils import config as config_utils
from utils.errors import PeekError


def run(args):
    try: # Set the configuration key-value pair
        config_utils.write_config(args.key, args.value, args.config)
        print(f"Set {args.key} to '{args.value}'")
    except (PeekError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
