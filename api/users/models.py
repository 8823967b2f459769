from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models
from django.core.validators import RegexValidator
from django.core.exceptions import ValidationError
import bcrypt
import uuid


class UsuarioManager(BaseUserManager):
    def create_user(self, username, email, password=None, **extra_fields):
        if not username:
            raise ValueError('O usuário deve ter um username')
        if not email:
            raise ValueError('O usuário deve ter um e-mail')

        email = self.normalize_email(email)
        usuario = self.model(username=username, email=email, **extra_fields)

        if password:
            usuario.set_password(password)

        usuario.save(using=self._db)
        return usuario

    def create_superuser(self, username, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_active', True)

        return self.create_user(username, email, password, **extra_fields)

    def get_by_natural_key(self, username):
        return self.get(username=username)


class Usuario(AbstractBaseUser):
    """Profissional da clínica com acesso ao sistema"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    nome = models.CharField(max_length=150)
    username = models.CharField(max_length=150, unique=True)
    email = models.EmailField(unique=True)

    telefone = models.CharField(
        max_length=20,
        blank=True,
        validators=[
            RegexValidator(regex=r'^\d{10,11}$', message="Somente números, com DDD (10 ou 11 dígitos).")
        ]
    )

    # Registro no Conselho Regional de Odontologia
    cro = models.CharField(max_length=20, blank=True, verbose_name='CRO')

    is_staff = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = 'username'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['nome', 'email']

    objects = UsuarioManager()

    def clean(self):
        if not self.nome:
            raise ValidationError("O nome é obrigatório.")
        if not self.email:
            raise ValidationError("O e-mail é obrigatório.")

    def set_password(self, password):
        """Gera o hash da senha com bcrypt"""
        salt = bcrypt.gensalt()
        self.password = bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')

    def check_password(self, password):
        """Verifica se a senha confere com o hash"""
        if not self.password or password is None:
            return False
        try:
            return bcrypt.checkpw(password.encode('utf-8'), self.password.encode('utf-8'))
        except ValueError:
            return False

    def get_full_name(self):
        return self.nome

    def get_short_name(self):
        return self.nome.split(' ')[0] if self.nome else self.username

    def has_perm(self, perm, obj=None):
        return self.is_staff

    def has_module_perms(self, app_label):
        return self.is_staff

    def __str__(self):
        return f'{self.username} - {self.nome}'

    class Meta:
        db_table = 'usuarios'
        verbose_name = 'Usuário'
        verbose_name_plural = 'Usuários'
        ordering = ['-criado_em']
