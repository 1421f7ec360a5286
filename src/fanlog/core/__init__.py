"""Core domain: levels, entries, dispatch and the driver registry."""
