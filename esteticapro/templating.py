"""
Template rendering utilities
"""
from pathlib import Path

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

# Autoescaping is on for .html templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
