from django import forms

from .models import Lead


class LeadForm(forms.ModelForm):
    """
    Dados aceites na criação/edição de um lead.
    O status não é gravado pelo form: a mudança passa pelo ciclo de vida
    (leads.ciclo_vida.registrar_status) para gerar o histórico.
    """
    status = forms.ChoiceField(choices=Lead.STATUS_CHOICES, required=False)
    motivo = forms.CharField(required=False)

    class Meta:
        model = Lead
        fields = [
            'nome_pessoa', 'nome_estabelecimento', 'cidade', 'telefone',
            'email', 'observacoes', 'fonte_lead', 'data_ultimo_contato',
        ]

    def __init__(self, *args, **kwargs):
        super(LeadForm, self).__init__(*args, **kwargs)
        self.fields['fonte_lead'].required = False

    def clean_fonte_lead(self):
        return self.cleaned_data.get('fonte_lead') or 'outro'
