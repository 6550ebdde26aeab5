"""Couch-style game launcher navigation built on navinput."""
