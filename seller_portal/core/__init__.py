"""Core application infrastructure"""
