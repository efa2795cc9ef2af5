"""Tests for the Rinnai Heater integration."""
