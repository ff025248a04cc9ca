"""
AuditDiff - field-level change detection for audit trails.

Compares two object snapshots and reports created, updated and deleted
fields, with optional order-independent matching of collection members.
"""

import sys
from auditdiff.interface.cli import main


if __name__ == "__main__":
    sys.exit(main())
