"""BFP Villanueva personnel management.

Feature packages (personnel, leave, clearance, awards, inventory, inspections,
training, recruitment) each pair a service/repository layer with a thin Flask
controller built on the shared ``listing`` screen helpers.
"""
from .main import create_app

__all__ = ["create_app"]
