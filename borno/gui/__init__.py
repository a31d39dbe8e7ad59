"""Qt integration for Borno."""
