"""Random Chooser: spins through a fixed list of people and reveals a random winner."""
