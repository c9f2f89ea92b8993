from django.contrib import admin
from unfold.admin import ModelAdmin, TabularInline

from .models import Problems, Test_cases


class TestCaseInline(TabularInline):
    model = Test_cases
    extra = 0
    fields = ('idx', 'is_private', 'input_data', 'expected_output', 'created_at')
    readonly_fields = ('created_at',)
    ordering = ('idx',)


@admin.register(Problems)
class ProblemAdmin(ModelAdmin):
    list_display = ('id', 'title', 'is_private', 'time_limit_ms', 'memory_limit_mb', 'creator', 'created_at')
    list_filter = ('is_private',)
    search_fields = ('title', 'creator__real_name')
    inlines = [TestCaseInline]


@admin.register(Test_cases)
class TestCaseAdmin(ModelAdmin):
    list_display = ('id', 'problem', 'idx', 'is_private', 'created_at')
    list_filter = ('is_private',)
    search_fields = ('problem__title',)
    ordering = ('problem', 'idx')
