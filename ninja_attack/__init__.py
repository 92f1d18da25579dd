"""Ninja Attack: shoot the monsters before they cross the screen."""
