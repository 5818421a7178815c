"""Rendering subpackage.

Turns a derived key into something a human can compare at a glance. The
only output format is the ANSI truecolor grid in
:mod:`mim.renderer.ansi`: four rows of eight byte-cells, each byte drawn
as two coloured squares picked from the fixed palette.
"""
