"""
Label layouts - the built-in default and resolution of the effective configuration
"""
import logging
import uuid

from core.services import DEFAULT_LABEL_CONFIG_KEY, SettingsService
from .models import LabelSettings

logger = logging.getLogger(__name__)

ELEMENT_TYPES = (
    'header', 'orderNumber', 'customerName', 'drink', 'details',
    'notes', 'verse', 'price', 'barcode',
)
FONT_WEIGHTS = ('normal', 'bold')
FONT_STYLES = ('normal', 'italic')
ALIGNMENTS = ('left', 'center', 'right')

DEFAULT_LABEL_WIDTH = 90.3
DEFAULT_LABEL_HEIGHT = 36
_CENTER_X = 45.15


def _element(element_id, element_type, y, font_size, weight='normal', style='normal', max_width=None, max_lines=None):
    element = {
        'id': element_id,
        'type': element_type,
        'x': _CENTER_X,
        'y': y,
        'fontSize': font_size,
        'fontWeight': weight,
        'fontStyle': style,
        'align': 'center',
    }
    if max_width is not None:
        element['maxWidth'] = max_width
        element['maxLines'] = max_lines
    return element


DEFAULT_LABEL_CONFIG = {
    'id': None,
    'name': 'Default',
    'width': DEFAULT_LABEL_WIDTH,
    'height': DEFAULT_LABEL_HEIGHT,
    'elements': [
        _element('header', 'header', 4, 10, weight='bold'),
        _element('orderNumber', 'orderNumber', 8, 9),
        _element('customerName', 'customerName', 14, 12, weight='bold'),
        _element('drink', 'drink', 18, 10),
        _element('details', 'details', 22, 8, max_width=85, max_lines=2),
        _element('notes', 'notes', 26, 7, style='italic', max_width=85, max_lines=2),
        _element('verse', 'verse', 31, 6, style='italic', max_width=85, max_lines=3),
    ],
}


def default_label_config():
    """A fresh copy of the built-in layout, safe to mutate."""
    return {
        **DEFAULT_LABEL_CONFIG,
        'elements': [dict(element) for element in DEFAULT_LABEL_CONFIG['elements']],
    }


def _lookup(config_id):
    if not config_id:
        return None
    try:
        pk = uuid.UUID(str(config_id))
    except ValueError:
        logger.warning("Ignoring malformed label config id %r", config_id)
        return None
    settings_row = LabelSettings.objects.filter(pk=pk).first()
    if settings_row is None:
        logger.warning("Label config %s not found", config_id)
    return settings_row


def get_effective_label_config(config_id=None):
    """
    Resolve the layout to print with.

    Args:
        config_id: Explicitly requested LabelSettings id (optional)

    Returns:
        Layout dict with id, name, width, height and elements. Falls back to the
        configured default and then the built-in layout when an id cannot be resolved.
    """
    for candidate in (config_id, SettingsService.get(DEFAULT_LABEL_CONFIG_KEY)):
        settings_row = _lookup(candidate)
        if settings_row is not None:
            return settings_row.as_layout()
    return default_label_config()
