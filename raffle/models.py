from django.db import models
import uuid


class RaffleParticipant(models.Model):
    """A customer entered in the giveaway; one entry per order they have placed."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer_name = models.CharField(max_length=255)
    phone_number = models.CharField(max_length=30)
    entries = models.PositiveIntegerField(default=0)
    has_won = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'raffle_participants'
        ordering = ['-created_at']
        unique_together = ['customer_name', 'phone_number']

    def __str__(self):
        return f"{self.customer_name} ({self.entries} entries)"
