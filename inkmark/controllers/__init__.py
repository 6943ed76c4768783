"""
Controllers that translate user input into window actions.
"""
from .input_handler import UserInputHandler

__all__ = ['UserInputHandler']
