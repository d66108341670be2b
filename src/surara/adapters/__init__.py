"""Hosts that connect the editor session to a real screen and keyboard."""
