from django.db import models
from users.models import User
from .utils import format_time_range

class Appointment(models.Model):
    WAITING_FOR_CONFIRMATION = 'Waiting_for_confirmation'
    PENDING = 'Pending'
    COMPLETED = 'Completed'
    REJECTED = 'Rejected'

    STATUS_CHOICES = [
        (WAITING_FOR_CONFIRMATION, 'Waiting for confirmation'),
        (PENDING, 'Pending'),
        (COMPLETED, 'Completed'),
        (REJECTED, 'Rejected'),
    ]
    TERMINAL_STATUSES = (COMPLETED, REJECTED)

    GENDER_CHOICES = [
        ('male', 'Male'),
        ('female', 'Female'),
        ('other', 'Other'),
    ]

    patient = models.ForeignKey(User, on_delete=models.CASCADE, related_name='appointments_as_patient')
    doctor = models.ForeignKey(User, on_delete=models.CASCADE, related_name='appointments_as_doctor')
    date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()

    # Intake details captured at booking
    age = models.PositiveIntegerField()
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES)
    blood_group = models.CharField(max_length=5, blank=True, null=True)
    number = models.CharField(max_length=20)
    family_diseases = models.TextField(blank=True, default='')
    email = models.EmailField(blank=True, null=True)

    status = models.CharField(max_length=30, choices=STATUS_CHOICES, default=WAITING_FOR_CONFIRMATION)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_time__gt=models.F('start_time')),
                name='appointment_end_after_start',
            ),
        ]

    @property
    def time_range(self):
        return format_time_range(self.start_time, self.end_time)

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES

    def __str__(self):
        return f"Appointment between {self.patient.username} and {self.doctor.username} on {self.date} at {self.time_range}"
