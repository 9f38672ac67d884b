"""Reverse-geocodes new trash detections and writes their administrative area."""
