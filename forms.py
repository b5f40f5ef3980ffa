"""
Forms — validation boundary in front of the Inventory service.

Forms reject missing or inconsistent input before anything is written.
save() hands the cleaned data to the service, never to the ORM directly.

    form = StockAdjustmentForm(product, data=request.POST)
    if form.is_valid():
        adjustment = form.save()
"""

from django import forms
from django.core.validators import MaxValueValidator
from django.utils.translation import gettext_lazy as _

from bizstock.models import Business, ChangeType, Product
from bizstock.models.product import MAX_STOCK


class BusinessForm(forms.ModelForm):
    """Create or edit a business. Name and contact are required."""

    class Meta:
        model = Business
        fields = ['name', 'owner', 'contact', 'category', 'address']

    def save(self, commit=True):
        if not commit:
            return super().save(commit=False)

        from bizstock.service import Inventory

        if self.instance.pk:
            return Inventory.update_business(self.instance.pk, **self.cleaned_data)
        return Inventory.create_business(**self.cleaned_data)


class ProductForm(forms.ModelForm):
    """
    Create or edit a product.

    Name, SKU and business are required. Opening stock can only be set
    on creation; afterwards stock changes through StockAdjustmentForm.
    """

    class Meta:
        model = Product
        fields = ['name', 'sku', 'business', 'category', 'price',
                  'current_stock', 'min_stock', 'description']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['business'].required = True
        self.fields['min_stock'].validators.append(MaxValueValidator(MAX_STOCK))
        if self.instance.pk:
            del self.fields['current_stock']
        else:
            self.fields['current_stock'].validators.append(MaxValueValidator(MAX_STOCK))

    def clean_sku(self):
        return self.cleaned_data['sku'].strip().upper()

    def save(self, commit=True):
        if not commit:
            return super().save(commit=False)

        from bizstock.service import Inventory

        if self.instance.pk:
            return Inventory.update_product(self.instance.pk, **self.cleaned_data)
        return Inventory.create_product(**self.cleaned_data)


class StockAdjustmentForm(forms.Form):
    """Stock in / stock out for one product."""

    direction = forms.ChoiceField(
        choices=ChangeType.choices,
        initial=ChangeType.IN,
        widget=forms.RadioSelect,
        label=_('Type'),
    )
    quantity = forms.IntegerField(
        min_value=1,
        max_value=MAX_STOCK,
        initial=1,
        label=_('Quantity'),
        error_messages={
            'min_value': _('Please enter a valid quantity'),
            'max_value': _('Please enter a valid quantity'),
        },
    )
    reason = forms.CharField(
        max_length=255,
        required=False,
        label=_('Reason'),
    )

    def __init__(self, product, *args, **kwargs):
        self.product = product
        super().__init__(*args, **kwargs)

    def clean(self):
        cleaned = super().clean()
        direction = cleaned.get('direction')
        quantity = cleaned.get('quantity')

        if (direction == ChangeType.OUT and quantity is not None
                and quantity > self.product.current_stock):
            raise forms.ValidationError(
                _('Insufficient stock'),
                code='insufficient_stock',
            )
        if (direction == ChangeType.IN and quantity is not None
                and self.product.current_stock + quantity > MAX_STOCK):
            raise forms.ValidationError(
                _('Please enter a valid quantity'),
                code='invalid_quantity',
            )
        return cleaned

    def save(self):
        from bizstock.service import Inventory

        return Inventory.adjust_stock(
            self.product.pk,
            self.cleaned_data['quantity'],
            self.cleaned_data['direction'],
            self.cleaned_data.get('reason'),
        )


class ScannerForm(forms.Form):
    """Manual QR / barcode lookup."""

    code = forms.CharField(
        max_length=1000,
        label=_('Code'),
        help_text=_('Scan a QR code or type a SKU'),
    )

    def lookup(self, products=None):
        """Product matching the code, or None."""
        from bizstock.qr import lookup_product

        return lookup_product(self.cleaned_data['code'], products)
