from django.contrib import admin
from .models import Usuario


@admin.register(Usuario)
class UsuarioAdmin(admin.ModelAdmin):
    list_display = ('username', 'email', 'nome', 'cro', 'is_staff', 'is_active')
    list_filter = ('is_staff', 'is_active')
    search_fields = ('username', 'email', 'nome', 'cro')
    readonly_fields = ('password', 'last_login', 'criado_em', 'atualizado_em')

    fieldsets = (
        (None, {
            'fields': ('username', 'password')
        }),
        ('Informações Pessoais', {
            'fields': ('nome', 'email', 'telefone', 'cro')
        }),
        ('Permissões', {
            'fields': ('is_active', 'is_staff')
        }),
        ('Auditoria', {
            'fields': ('last_login', 'criado_em', 'atualizado_em')
        }),
    )
