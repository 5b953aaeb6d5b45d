# ==============================================
# Cell Statistics
# ==============================================
#
# Package Structure (3 Topics + Session):
#
# cellstats/
# ├── normalization/    # Topic 1: Turn raw CSV fields into typed Cell records
# ├── storage/          # Topic 2: Keyed in-memory store + CSV ingestion
# ├── analysis/         # Topic 3: Aggregate questions over the store
# ├── config.py         # Configuration management
# ├── log.py            # Logging setup
# ├── errors.py         # Exception hierarchy
# ├── session.py        # Explicit session object + interactive shell
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
