"""
Library modules used by the derivation engine in `mspdb.derive`.
"""
