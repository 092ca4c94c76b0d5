# Em: leads/models.py

from django.conf import settings
from django.db import models


class Lead(models.Model):
    STATUS_CHOICES = (
        ('novo', 'Novo'),
        ('em_contato', 'Em Contato'),
        ('qualificado', 'Qualificado'),
        ('proposta_enviada', 'Proposta Enviada'),
        ('perdido', 'Perdido'),
        ('convertido', 'Convertido'),
    )
    FONTE_CHOICES = (
        ('indicacao', 'Indicação'),
        ('site', 'Site'),
        ('evento', 'Evento'),
        ('cold_call', 'Cold Call'),
        ('outro', 'Outro'),
    )

    nome_pessoa = models.CharField(max_length=255, verbose_name="Nome do Contato")
    nome_estabelecimento = models.CharField(max_length=255, verbose_name="Estabelecimento")
    cidade = models.CharField(max_length=100, verbose_name="Cidade")
    telefone = models.CharField(max_length=20, verbose_name="Telefone")
    email = models.EmailField(max_length=320, blank=True, null=True, verbose_name="E-mail")
    observacoes = models.TextField(blank=True, null=True, verbose_name="Observações")

    status = models.CharField(max_length=30, choices=STATUS_CHOICES, default='novo')
    representante = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="leads",
        verbose_name="Representante"
    )
    fonte_lead = models.CharField(max_length=20, choices=FONTE_CHOICES, default='outro', verbose_name="Fonte")
    data_ultimo_contato = models.DateTimeField(blank=True, null=True, verbose_name="Último Contato")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.nome_pessoa} - {self.nome_estabelecimento}"


class HistoricoLead(models.Model):
    """
    Trilha de auditoria das mudanças de status do Lead.
    Só aceita inserções: linhas gravadas nunca são alteradas nem apagadas,
    nem mesmo quando o admin exclui o lead (a FK não tem constraint no banco).
    """
    lead = models.ForeignKey(
        Lead,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="historico",
        verbose_name="Lead"
    )
    status_anterior = models.CharField(max_length=30, blank=True, null=True, verbose_name="Status Anterior")
    status_novo = models.CharField(max_length=30, verbose_name="Status Novo")
    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="alteracoes_leads",
        verbose_name="Alterado por"
    )
    motivo = models.TextField(blank=True, null=True, verbose_name="Motivo")
    data_alteracao = models.DateTimeField(auto_now_add=True, verbose_name="Data da Alteração")

    class Meta:
        verbose_name = "Histórico do Lead"
        verbose_name_plural = "Histórico dos Leads"
        ordering = ['-data_alteracao', '-id']

    def __str__(self):
        return f"Lead #{self.lead_id}: {self.status_anterior} -> {self.status_novo}"

    def save(self, *args, **kwargs):
        if self.pk is not None:
            raise ValueError("O histórico de leads não pode ser alterado.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("O histórico de leads não pode ser apagado.")
