"""Domain layer for fueleu application.

Services are imported from their modules (e.g. ``fueleu.domain.banking``);
this package does not re-export them so that the database layer can import
``fueleu.domain.entities`` without a circular import.
"""
