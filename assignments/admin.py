from django.contrib import admin
from unfold.admin import ModelAdmin

from .models import Assignments


@admin.register(Assignments)
class AssignmentsAdmin(ModelAdmin):
    list_display = ['id', 'title', 'course', 'problem', 'creator', 'due_time', 'created_at']
    list_filter = ['due_time', 'created_at']
    search_fields = ['title', 'course__name', 'problem__title', 'creator__username']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = [
        ('Activity', {
            'fields': ['title', 'description', 'course', 'problem', 'creator']
        }),
        ('Schedule', {
            'fields': ['due_time']
        }),
        ('System', {
            'fields': ['created_at', 'updated_at'],
            'classes': ['collapse']
        }),
    ]

    date_hierarchy = 'created_at'
    ordering = ['-created_at']
