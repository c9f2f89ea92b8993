from django.contrib import admin
from unfold.admin import ModelAdmin, TabularInline
from unfold.decorators import display

from .models import Correction, Status, Submission


class CorrectionInline(TabularInline):
    model = Correction
    extra = 0
    fields = ['test_case', 'token', 'status', 'judged_at']
    readonly_fields = ['test_case', 'token', 'status', 'judged_at']
    can_delete = False
    max_num = 0


@admin.register(Submission)
class SubmissionAdmin(ModelAdmin):
    list_display = ('id', 'user', 'problem', 'assignment', 'display_language', 'display_status', 'created_at', 'judged_at')
    list_filter = ('status', 'language_type')
    search_fields = ('user__username', 'problem__title', 'id')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'created_at', 'judged_at')
    inlines = [CorrectionInline]
    list_per_page = 25

    fieldsets = (
        ("Submission", {
            "fields": ("id", "user", "problem", "assignment", "language_type"),
        }),
        ("Code", {
            "fields": ("source_code",),
            "classes": ["collapse"],
        }),
        ("Verdict", {
            "fields": ("status", "created_at", "judged_at"),
        }),
    )

    @display(description="Language", label={
        'C': "info",
        'C++': "primary",
        'Python': "success",
        'Java': "warning",
        'JavaScript': "danger",
    })
    def display_language(self, instance):
        return instance.get_language_type_display()

    @display(description="Status", label={
        'Pending': "warning",
        Status.ACCEPTED.label: "success",
        Status.INTERNAL_ERROR.label: "secondary",
    })
    def display_status(self, instance):
        if instance.status is None:
            return 'Pending'
        return instance.get_status_display()


@admin.register(Correction)
class CorrectionAdmin(ModelAdmin):
    list_display = ('id', 'submission', 'test_case', 'token', 'status', 'judged_at')
    list_filter = ('status',)
    search_fields = ('token', 'submission__id')
    ordering = ('-id',)
    readonly_fields = ('created_at', 'judged_at')
