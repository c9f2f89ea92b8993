from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin
from unfold.admin import ModelAdmin, StackedInline
from unfold.forms import AdminPasswordChangeForm, UserChangeForm, UserCreationForm
from unfold.decorators import display
from .models import User, UserProfile


class UserProfileInline(StackedInline):
    model = UserProfile
    can_delete = False
    fields = ('registration', 'program', 'field_of_work')


@admin.register(User)
class UserAdmin(DjangoUserAdmin, ModelAdmin):
    form = UserChangeForm
    add_form = UserCreationForm
    change_password_form = AdminPasswordChangeForm
    inlines = [UserProfileInline]

    fieldsets = (
        (None, {'fields': ('username', 'password', 'must_change_password')}),
        ('Personal info', {'fields': ('real_name', 'email')}),
        ('Role', {'fields': ('identity',)}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Important dates', {'fields': ('last_login', 'date_joined')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('username', 'email', 'real_name', 'identity', 'password1', 'password2')
        }),
    )
    list_display = ('username', 'email', 'real_name', 'display_identity', 'must_change_password', 'is_active', 'date_joined')
    list_filter = ('identity', 'must_change_password', 'is_staff', 'is_active')
    search_fields = ('username', 'email', 'real_name')
    ordering = ('-date_joined',)
    list_per_page = 25

    @display(description="Identity", label={
        "student": "info",
        "teacher": "success",
        "admin": "danger",
    })
    def display_identity(self, instance):
        return instance.identity
