from django.contrib import admin
from unfold.admin import ModelAdmin, TabularInline
from .models import Courses, Course_members


class CourseMembersInline(TabularInline):
    model = Course_members
    extra = 0
    fields = ['user', 'joined_at']
    readonly_fields = ['joined_at']
    autocomplete_fields = ['user']


@admin.register(Courses)
class CoursesAdmin(ModelAdmin):
    list_display = ("id", "name", "teacher", "created_at")
    search_fields = ("name", "teacher__username", "teacher__real_name")
    ordering = ("-created_at",)
    readonly_fields = ("created_at", "updated_at")
    autocomplete_fields = ['teacher']
    inlines = [CourseMembersInline]
    list_per_page = 25

    fieldsets = (
        ("Course", {
            "fields": ("name", "description", "teacher"),
        }),
        ("Timestamps", {
            "fields": ("created_at", "updated_at"),
            "classes": ["collapse"],
        }),
    )


@admin.register(Course_members)
class CourseMembersAdmin(ModelAdmin):
    list_display = ("course", "user", "joined_at")
    list_filter = ("course",)
    search_fields = ("course__name", "user__username", "user__real_name")
    ordering = ("-joined_at",)
    autocomplete_fields = ['course', 'user']
    list_per_page = 25
