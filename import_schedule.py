#!/usr/bin/env python3
"""
Import or export the whole station as a flat JSON document

Usage:
    python import_schedule.py import db.json
    python import_schedule.py export backup.json

The import understands the old db.json layout that was a bare list of
programs; those are migrated onto the default channels.
"""

import json
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from app import app, db
from services.seed_service import export_document, import_document


def import_file(path):
    """Load a document from path into the database"""
    print(f"Importing {path}...")

    with open(path) as f:
        document = json.load(f)

    with app.app_context():
        db.create_all()
        stats = import_document(document)

    print(f"✓ Channels: {stats['channels_created']} created, {stats['channels_updated']} updated")
    print(f"✓ Programs: {stats['programs_created']} created, {stats['programs_updated']} updated")


def export_file(path):
    """Write every channel and program to path"""
    with app.app_context():
        document = export_document()

    with open(path, "w") as f:
        json.dump(document, f, indent=2)

    print(f"✓ Exported {len(document['channels'])} channels and {len(document['programs'])} programs to {path}")


if __name__ == "__main__":
    if len(sys.argv) != 3 or sys.argv[1] not in ("import", "export"):
        print("Usage: import_schedule.py [import|export] PATH")
        sys.exit(1)

    if sys.argv[1] == "import":
        import_file(sys.argv[2])
    else:
        export_file(sys.argv[2])
