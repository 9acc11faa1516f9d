from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


INFO_TRIBUTARIA = """
  <infoTributaria>
    <ambiente>1</ambiente>
    <tipoEmision>1</tipoEmision>
    <razonSocial>COMERCIAL ANDINA S.A.</razonSocial>
    <nombreComercial>ANDINA</nombreComercial>
    <ruc>1790011223001</ruc>
    <claveAcceso>1503202401179001122300110010020000001231234567811</claveAcceso>
    <codDoc>{cod_doc}</codDoc>
    <estab>001</estab>
    <ptoEmi>002</ptoEmi>
    <secuencial>000000123</secuencial>
    <dirMatriz>Av. Amazonas N34-120, Quito</dirMatriz>
  </infoTributaria>"""

INVOICE_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<factura id="comprobante" version="1.1.0">{INFO_TRIBUTARIA.format(cod_doc="01")}
  <infoFactura>
    <fechaEmision>15/03/2024</fechaEmision>
    <dirEstablecimiento>Av. Amazonas N34-120</dirEstablecimiento>
    <obligadoContabilidad>SI</obligadoContabilidad>
    <tipoIdentificacionComprador>04</tipoIdentificacionComprador>
    <razonSocialComprador>Distribuidora del Pacífico Cía. Ltda.</razonSocialComprador>
    <identificacionComprador>0991234567001</identificacionComprador>
    <direccionComprador>Guayaquil</direccionComprador>
    <totalSinImpuestos>100.00</totalSinImpuestos>
    <totalDescuento>5.00</totalDescuento>
    <totalConImpuestos>
      <totalImpuesto>
        <codigo>2</codigo>
        <codigoPorcentaje>4</codigoPorcentaje>
        <baseImponible>100.00</baseImponible>
        <tarifa>15</tarifa>
        <valor>15.00</valor>
      </totalImpuesto>
    </totalConImpuestos>
    <propina>0.00</propina>
    <importeTotal>115.00</importeTotal>
    <moneda>DOLAR</moneda>
  </infoFactura>
  <detalles>
    <detalle>
      <codigoPrincipal>P-001</codigoPrincipal>
      <codigoAuxiliar>AUX-1</codigoAuxiliar>
      <descripcion>Cemento gris 50kg</descripcion>
      <cantidad>4.000000</cantidad>
      <precioUnitario>26.250000</precioUnitario>
      <descuento>5.00</descuento>
      <precioTotalSinImpuesto>100.00</precioTotalSinImpuesto>
      <impuestos>
        <impuesto>
          <codigo>2</codigo>
          <codigoPorcentaje>4</codigoPorcentaje>
          <tarifa>15</tarifa>
          <baseImponible>100.00</baseImponible>
          <valor>15.00</valor>
        </impuesto>
      </impuestos>
    </detalle>
  </detalles>
  <infoAdicional>
    <campoAdicional nombre="Email">compras@pacifico.ec</campoAdicional>
    <campoAdicional nombre="Teléfono">042345678</campoAdicional>
  </infoAdicional>
</factura>
"""

CREDIT_NOTE_XML = f"""<notaCredito id="comprobante" version="1.1.0">{INFO_TRIBUTARIA.format(cod_doc="04")}
  <infoNotaCredito>
    <fechaEmision>20/03/2024</fechaEmision>
    <dirEstablecimiento>Av. Amazonas N34-120</dirEstablecimiento>
    <tipoIdentificacionComprador>04</tipoIdentificacionComprador>
    <razonSocialComprador>Distribuidora del Pacífico Cía. Ltda.</razonSocialComprador>
    <identificacionComprador>0991234567001</identificacionComprador>
    <codDocModificado>01</codDocModificado>
    <numDocModificado>001-002-000000123</numDocModificado>
    <fechaEmisionDocSustento>15/03/2024</fechaEmisionDocSustento>
    <totalSinImpuestos>26.25</totalSinImpuestos>
    <valorModificacion>30.19</valorModificacion>
    <moneda>DOLAR</moneda>
    <totalConImpuestos>
      <totalImpuesto>
        <codigo>2</codigo>
        <codigoPorcentaje>4</codigoPorcentaje>
        <baseImponible>26.25</baseImponible>
        <valor>3.94</valor>
      </totalImpuesto>
    </totalConImpuestos>
    <motivo>Devolución de un saco</motivo>
  </infoNotaCredito>
  <detalles>
    <detalle>
      <codigoInterno>P-001</codigoInterno>
      <descripcion>Cemento gris 50kg</descripcion>
      <cantidad>1</cantidad>
      <precioUnitario>26.25</precioUnitario>
      <descuento>0</descuento>
      <precioTotalSinImpuesto>26.25</precioTotalSinImpuesto>
    </detalle>
  </detalles>
</notaCredito>
"""

DEBIT_NOTE_XML = f"""<notaDebito id="comprobante" version="1.0.0">{INFO_TRIBUTARIA.format(cod_doc="05")}
  <infoNotaDebito>
    <fechaEmision>22/03/2024</fechaEmision>
    <tipoIdentificacionComprador>04</tipoIdentificacionComprador>
    <razonSocialComprador>Distribuidora del Pacífico Cía. Ltda.</razonSocialComprador>
    <identificacionComprador>0991234567001</identificacionComprador>
    <codDocModificado>01</codDocModificado>
    <numDocModificado>001-002-000000123</numDocModificado>
    <fechaEmisionDocSustento>15/03/2024</fechaEmisionDocSustento>
    <totalSinImpuestos>10.00</totalSinImpuestos>
    <impuestos>
      <impuesto>
        <codigo>2</codigo>
        <codigoPorcentaje>4</codigoPorcentaje>
        <tarifa>15</tarifa>
        <baseImponible>10.00</baseImponible>
        <valor>1.50</valor>
      </impuesto>
    </impuestos>
    <valorTotal>11.50</valorTotal>
  </infoNotaDebito>
  <motivos>
    <motivo>
      <razon>Intereses por mora</razon>
      <valor>10.00</valor>
    </motivo>
  </motivos>
</notaDebito>
"""

WAYBILL_XML = f"""<guiaRemision id="comprobante" version="1.1.0">{INFO_TRIBUTARIA.format(cod_doc="06")}
  <infoGuiaRemision>
    <dirEstablecimiento>Av. Amazonas N34-120</dirEstablecimiento>
    <dirPartida>Bodega Norte, Quito</dirPartida>
    <razonSocialTransportista>Transportes Sierra</razonSocialTransportista>
    <tipoIdentificacionTransportista>04</tipoIdentificacionTransportista>
    <rucTransportista>1791122334001</rucTransportista>
    <fechaIniTransporte>18/03/2024</fechaIniTransporte>
    <fechaFinTransporte>19/03/2024</fechaFinTransporte>
    <placa>PBA-1234</placa>
  </infoGuiaRemision>
  <destinatarios>
    <destinatario>
      <identificacionDestinatario>0991234567001</identificacionDestinatario>
      <razonSocialDestinatario>Distribuidora del Pacífico Cía. Ltda.</razonSocialDestinatario>
      <dirDestinatario>Guayaquil</dirDestinatario>
      <motivoTraslado>Venta</motivoTraslado>
      <ruta>Quito - Guayaquil</ruta>
      <codDocSustento>01</codDocSustento>
      <numDocSustento>001-002-000000123</numDocSustento>
      <fechaEmisionDocSustento>15/03/2024</fechaEmisionDocSustento>
      <detalles>
        <detalle>
          <codigoInterno>P-001</codigoInterno>
          <descripcion>Cemento gris 50kg</descripcion>
          <cantidad>4</cantidad>
        </detalle>
      </detalles>
    </destinatario>
  </destinatarios>
</guiaRemision>
"""

RETENTION_V1_XML = f"""<comprobanteRetencion id="comprobante" version="1.0.0">{INFO_TRIBUTARIA.format(cod_doc="07")}
  <infoCompRetencion>
    <fechaEmision>31/03/2024</fechaEmision>
    <tipoIdentificacionSujetoRetenido>04</tipoIdentificacionSujetoRetenido>
    <razonSocialSujetoRetenido>Servicios Técnicos Quito</razonSocialSujetoRetenido>
    <identificacionSujetoRetenido>1792233445001</identificacionSujetoRetenido>
    <periodoFiscal>03/2024</periodoFiscal>
  </infoCompRetencion>
  <impuestos>
    <impuesto>
      <codigo>1</codigo>
      <codigoRetencion>312</codigoRetencion>
      <baseImponible>200.00</baseImponible>
      <porcentajeRetener>1.75</porcentajeRetener>
      <valorRetenido>3.50</valorRetenido>
      <codDocSustento>01</codDocSustento>
      <numDocSustento>001001000004567</numDocSustento>
      <fechaEmisionDocSustento>28/03/2024</fechaEmisionDocSustento>
    </impuesto>
    <impuesto>
      <codigo>2</codigo>
      <codigoRetencion>1</codigoRetencion>
      <baseImponible>30.00</baseImponible>
      <porcentajeRetener>30</porcentajeRetener>
      <valorRetenido>9.00</valorRetenido>
      <codDocSustento>01</codDocSustento>
      <numDocSustento>001001000004567</numDocSustento>
      <fechaEmisionDocSustento>28/03/2024</fechaEmisionDocSustento>
    </impuesto>
  </impuestos>
</comprobanteRetencion>
"""

RETENTION_V2_XML = f"""<comprobanteRetencion id="comprobante" version="2.0.0">{INFO_TRIBUTARIA.format(cod_doc="07")}
  <infoCompRetencion>
    <fechaEmision>30/04/2024</fechaEmision>
    <tipoIdentificacionSujetoRetenido>04</tipoIdentificacionSujetoRetenido>
    <razonSocialSujetoRetenido>Servicios Técnicos Quito</razonSocialSujetoRetenido>
    <identificacionSujetoRetenido>1792233445001</identificacionSujetoRetenido>
    <periodoFiscal>04/2024</periodoFiscal>
  </infoCompRetencion>
  <docsSustento>
    <docSustento>
      <codSustento>01</codSustento>
      <codDocSustento>01</codDocSustento>
      <numDocSustento>001001000004999</numDocSustento>
      <fechaEmisionDocSustento>25/04/2024</fechaEmisionDocSustento>
      <retenciones>
        <retencion>
          <codigo>1</codigo>
          <codigoRetencion>303</codigoRetencion>
          <baseImponible>500.00</baseImponible>
          <porcentajeRetener>10</porcentajeRetener>
          <valorRetenido>50.00</valorRetenido>
        </retencion>
      </retenciones>
    </docSustento>
  </docsSustento>
</comprobanteRetencion>
"""

PURCHASE_SETTLEMENT_XML = f"""<liquidacionCompra id="comprobante" version="1.1.0">{INFO_TRIBUTARIA.format(cod_doc="03")}
  <infoLiquidacionCompra>
    <fechaEmision>05/04/2024</fechaEmision>
    <tipoIdentificacionProveedor>05</tipoIdentificacionProveedor>
    <razonSocialProveedor>María Quishpe</razonSocialProveedor>
    <identificacionProveedor>1712345678</identificacionProveedor>
    <direccionProveedor>Cayambe</direccionProveedor>
    <totalSinImpuestos>80.00</totalSinImpuestos>
    <totalDescuento>0.00</totalDescuento>
    <totalConImpuestos>
      <totalImpuesto>
        <codigo>2</codigo>
        <codigoPorcentaje>0</codigoPorcentaje>
        <baseImponible>80.00</baseImponible>
        <valor>0.00</valor>
      </totalImpuesto>
    </totalConImpuestos>
    <importeTotal>80.00</importeTotal>
    <moneda>DOLAR</moneda>
  </infoLiquidacionCompra>
  <detalles>
    <detalle>
      <codigoPrincipal>L-01</codigoPrincipal>
      <descripcion>Leche cruda (litros)</descripcion>
      <cantidad>200</cantidad>
      <precioUnitario>0.40</precioUnitario>
      <descuento>0</descuento>
      <precioTotalSinImpuesto>80.00</precioTotalSinImpuesto>
    </detalle>
  </detalles>
</liquidacionCompra>
"""


def wrap_in_envelope(payload: str) -> str:
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<autorizacion>
  <estado>AUTORIZADO</estado>
  <numeroAutorizacion>1503202401179001122300110010020000001231234567811</numeroAutorizacion>
  <fechaAutorizacion>2024-03-15T10:21:33-05:00</fechaAutorizacion>
  <ambiente>PRUEBAS</ambiente>
  <comprobante><![CDATA[{payload}]]></comprobante>
  <mensajes/>
</autorizacion>
"""


IDENTITY_XSL = """<?xml version="1.0" encoding="UTF-8"?>
<xsl:stylesheet version="1.0" xmlns:xsl="http://www.w3.org/1999/XSL/Transform">
  <xsl:output method="xml" omit-xml-declaration="yes"/>
  <xsl:template match="@*|node()">
    <xsl:copy>
      <xsl:apply-templates select="@*|node()"/>
    </xsl:copy>
  </xsl:template>
</xsl:stylesheet>
"""


@pytest.fixture()
def invoice_xml() -> str:
    return INVOICE_XML


@pytest.fixture()
def signed_invoice_xml() -> str:
    return wrap_in_envelope(INVOICE_XML)


@pytest.fixture()
def sample_vouchers() -> dict[str, str]:
    """SRI documents keyed by the label they should be classified as."""

    return {
        "invoice": INVOICE_XML,
        "purchaseSettlement": PURCHASE_SETTLEMENT_XML,
        "creditNote": CREDIT_NOTE_XML,
        "debitNote": DEBIT_NOTE_XML,
        "waybill": WAYBILL_XML,
        "retention": RETENTION_V1_XML,
    }


@pytest.fixture()
def xsl_store(tmp_path: Path) -> Path:
    """Stylesheet directory holding an identity ``invoice.xsl`` only."""

    store = tmp_path / "xsl"
    store.mkdir()
    (store / "invoice.xsl").write_text(IDENTITY_XSL, encoding="utf-8")
    return store


@pytest.fixture()
def retention_v2_xml() -> str:
    return RETENTION_V2_XML
