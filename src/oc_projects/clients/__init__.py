"""Clients for reading session state and talking to the cluster."""
