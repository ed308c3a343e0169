from django.db import models
import uuid


class LabelSettings(models.Model):
    """A named label layout: physical size in millimetres plus positioned text elements."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    width = models.FloatField()
    height = models.FloatField()
    elements = models.JSONField(default=list)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'label_settings'
        verbose_name_plural = "Label Settings"
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.width} x {self.height} mm)"

    def as_layout(self):
        return {
            'id': str(self.id),
            'name': self.name,
            'width': self.width,
            'height': self.height,
            'elements': list(self.elements) if isinstance(self.elements, list) else [],
        }
