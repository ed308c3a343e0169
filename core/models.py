from django.db import models


class Setting(models.Model):
    """Application-wide key/value settings (pricing, thresholds, label defaults)."""
    key = models.CharField(max_length=100, unique=True)
    value = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'settings'
        ordering = ['key']

    def __str__(self):
        return f"{self.key}={self.value}"
