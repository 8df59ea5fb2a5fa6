# Copyright (C) Izhar Ahmad 2025-2026

from vitals.cli import main

if __name__ == "__main__":
    main(prog_name="vitals")
