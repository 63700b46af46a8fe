#!/usr/bin/env python3
"""Manage accounts on the remote SOAP service.

Examples::

    python scripts/manage_accounts.py list
    python scripts/manage_accounts.py create --balance 250.00 --type SAVINGS
    python scripts/manage_accounts.py delete 42 --yes
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from account_client.cli import main

if __name__ == "__main__":
    sys.exit(main())
