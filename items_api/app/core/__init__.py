"""
Core infrastructure shared by every layer: settings, logging, database
connections and the error taxonomy.
"""
