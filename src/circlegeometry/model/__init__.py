"""
The MODEL layer contains the circle value object and its helpers.
It has NO knowledge of logging setup or any presentation layer.
It deals with Geometry, Validation and Errors.
"""
