"""Textual widgets and screens of the spark_therapy client."""
