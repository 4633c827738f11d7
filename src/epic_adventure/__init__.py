"""Epic Adventure: a crossroads text adventure with turn-based combat."""
