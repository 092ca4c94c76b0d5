import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('common', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Orcamento',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('numero', models.CharField(max_length=50, unique=True, verbose_name='Número do Orçamento')),
                ('data_orcamento', models.DateTimeField(auto_now_add=True, verbose_name='Data do Orçamento')),
                ('data_validade', models.DateField(blank=True, null=True, verbose_name='Validade')),
                ('status', models.CharField(choices=[('rascunho', 'Rascunho'), ('enviado', 'Enviado'), ('aceito', 'Aceito'), ('rejeitado', 'Rejeitado'), ('expirado', 'Expirado')], default='rascunho', max_length=20)),
                ('valor_total', models.DecimalField(decimal_places=2, max_digits=12, verbose_name='Subtotal dos Itens')),
                ('desconto_percentual', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True, verbose_name='Desconto (%)')),
                ('desconto_valor', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, verbose_name='Desconto (R$)')),
                ('valor_liquido', models.DecimalField(decimal_places=2, max_digits=12, verbose_name='Valor Líquido')),
                ('observacoes', models.TextField(blank=True, null=True, verbose_name='Observações')),
                ('condicoes_pagamento', models.TextField(blank=True, null=True, verbose_name='Condições de Pagamento')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('cliente', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='orcamentos', to='common.cliente', verbose_name='Cliente')),
                ('empresa', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='orcamentos', to='common.empresarepresentada', verbose_name='Empresa Representada')),
                ('representante', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='orcamentos', to=settings.AUTH_USER_MODEL, verbose_name='Representante')),
            ],
            options={
                'verbose_name': 'Orçamento',
                'verbose_name_plural': 'Orçamentos',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='ItemOrcamento',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nome_produto', models.CharField(max_length=255, verbose_name='Produto')),
                ('descricao', models.TextField(blank=True, null=True, verbose_name='Descrição')),
                ('quantidade', models.DecimalField(decimal_places=2, max_digits=10, verbose_name='Quantidade')),
                ('valor_unitario', models.DecimalField(decimal_places=2, max_digits=12, verbose_name='Valor Unitário')),
                ('valor_total', models.DecimalField(decimal_places=2, max_digits=12, verbose_name='Total do Item')),
                ('ordem', models.PositiveIntegerField(verbose_name='Ordem')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('orcamento', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='itens', to='vendas.orcamento', verbose_name='Orçamento')),
                ('produto', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='itens_orcamento', to='common.produto', verbose_name='Produto de Referência')),
            ],
            options={
                'verbose_name': 'Item do Orçamento',
                'verbose_name_plural': 'Itens do Orçamento',
                'ordering': ['ordem', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Venda',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('numero', models.CharField(max_length=50, unique=True, verbose_name='Número da Venda')),
                ('valor_total', models.DecimalField(decimal_places=2, max_digits=12, verbose_name='Valor Total')),
                ('comissao_percentual', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True, verbose_name='Comissão (%)')),
                ('comissao_valor', models.DecimalField(decimal_places=2, default=0, max_digits=12, verbose_name='Comissão (R$)')),
                ('data_venda', models.DateTimeField(auto_now_add=True, verbose_name='Data da Venda')),
                ('data_entrega_prevista', models.DateField(blank=True, null=True, verbose_name='Entrega Prevista')),
                ('data_entrega_real', models.DateField(blank=True, null=True, verbose_name='Entrega Realizada')),
                ('status', models.CharField(choices=[('pendente', 'Pendente'), ('confirmada', 'Confirmada'), ('entregue', 'Entregue'), ('cancelada', 'Cancelada')], default='pendente', max_length=20)),
                ('observacoes', models.TextField(blank=True, null=True, verbose_name='Observações')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('cliente', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='compras', to='common.cliente', verbose_name='Cliente')),
                ('empresa', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='vendas', to='common.empresarepresentada', verbose_name='Empresa Representada')),
                ('orcamento', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='vendas', to='vendas.orcamento', verbose_name='Orçamento de Origem')),
                ('representante', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='vendas', to=settings.AUTH_USER_MODEL, verbose_name='Representante')),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
    ]
