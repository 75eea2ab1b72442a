"""
worldkeeper - persisted configuration records for managed worlds

Each managed world has one configuration record: the parameters it was
created with (name, type, generator settings, seed, structure generation,
generator) and its runtime state (whether it is loaded, plus free-form
string flags). Records are built by hand, snapshotted from a running world,
or loaded from a JSON file, and can be saved back to disk.

Package Structure:
- core/world/: the record, its builder, world types and live snapshots
- core/config/: the on-disk schema and the JSON codec
- core/utils/: logging
"""

__version__ = "0.1.0"
