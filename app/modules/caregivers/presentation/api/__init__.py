"""Caregivers module package."""
