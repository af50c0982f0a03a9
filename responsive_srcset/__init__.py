"""
Responsive Image Srcset Generation

Builds `srcset` and `sizes` attribute values for images delivered through
a remote image-transformation CDN, one transformed URL per breakpoint width.
"""

__version__ = "0.1.0"
