from django import forms


class CredentialsForm(forms.Form):
    email = forms.EmailField(
        widget=forms.EmailInput(attrs={"placeholder": "Enter your email address", "autofocus": True}),
    )
    password = forms.CharField(
        min_length=6,
        strip=False,
        widget=forms.PasswordInput(attrs={"placeholder": "Enter password"}),
    )
