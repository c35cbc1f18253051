"""
Configuration for factorymethod
"""
import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

# Logging goes to stderr only; stdout carries the transport messages
LOG_LEVEL = os.getenv('FACTORYMETHOD_LOG_LEVEL', 'WARNING').upper()
if LOG_LEVEL not in LOG_LEVELS:
    LOG_LEVEL = 'WARNING'
