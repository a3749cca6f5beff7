"""
reset_data.py
-------------
Utility script to clear all stored records (vehicles, customers, rentals, history)
from the rental data file.

This script is designed for development and testing purposes.
It loads the configured data file, empties the manager, then saves it back.

Usage:
    $ python reset_data.py

After running this script, you can repopulate sample data by executing:
    $ python seeds.py
"""

from vehicle_rental import create_app


def main():
    manager = create_app()

    # Clear all existing record categories
    manager.store.clear()

    # Persist the cleared state to disk
    manager.save_to_file()

    print(f"{manager.store.path} has been successfully cleared.")
    print("Tip: Run `python seeds.py` to regenerate demo data.")


if __name__ == "__main__":
    main()
