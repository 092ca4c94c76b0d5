import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Lead',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nome_pessoa', models.CharField(max_length=255, verbose_name='Nome do Contato')),
                ('nome_estabelecimento', models.CharField(max_length=255, verbose_name='Estabelecimento')),
                ('cidade', models.CharField(max_length=100, verbose_name='Cidade')),
                ('telefone', models.CharField(max_length=20, verbose_name='Telefone')),
                ('email', models.EmailField(blank=True, max_length=320, null=True, verbose_name='E-mail')),
                ('observacoes', models.TextField(blank=True, null=True, verbose_name='Observações')),
                ('status', models.CharField(choices=[('novo', 'Novo'), ('em_contato', 'Em Contato'), ('qualificado', 'Qualificado'), ('proposta_enviada', 'Proposta Enviada'), ('perdido', 'Perdido'), ('convertido', 'Convertido')], default='novo', max_length=30)),
                ('fonte_lead', models.CharField(choices=[('indicacao', 'Indicação'), ('site', 'Site'), ('evento', 'Evento'), ('cold_call', 'Cold Call'), ('outro', 'Outro')], default='outro', max_length=20, verbose_name='Fonte')),
                ('data_ultimo_contato', models.DateTimeField(blank=True, null=True, verbose_name='Último Contato')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('representante', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='leads', to=settings.AUTH_USER_MODEL, verbose_name='Representante')),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='HistoricoLead',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status_anterior', models.CharField(blank=True, max_length=30, null=True, verbose_name='Status Anterior')),
                ('status_novo', models.CharField(max_length=30, verbose_name='Status Novo')),
                ('motivo', models.TextField(blank=True, null=True, verbose_name='Motivo')),
                ('data_alteracao', models.DateTimeField(auto_now_add=True, verbose_name='Data da Alteração')),
                ('lead', models.ForeignKey(db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name='historico', to='leads.lead', verbose_name='Lead')),
                ('usuario', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='alteracoes_leads', to=settings.AUTH_USER_MODEL, verbose_name='Alterado por')),
            ],
            options={
                'verbose_name': 'Histórico do Lead',
                'verbose_name_plural': 'Histórico dos Leads',
                'ordering': ['-data_alteracao', '-id'],
            },
        ),
    ]
