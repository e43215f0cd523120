from calc_aposentadoria.extractors.bcb_focus import BcbFocusExtractor
from calc_aposentadoria.extractors.bcb_sgs import BcbSgsExtractor
from calc_aposentadoria.services.focus import FocusDataAdapter
from calc_aposentadoria.services.inflacao import InflationDataAdapter
from calc_aposentadoria.utils.io.http import HTTPConfig, RequestsTransport
from calc_aposentadoria.utils.logging.json_formatter import build_logger


def main():
    build_logger("calc_aposentadoria")
    http = RequestsTransport(HTTPConfig(timeout_sec=60))

    inflacao = InflationDataAdapter(BcbSgsExtractor(http))
    focus = FocusDataAdapter(BcbFocusExtractor(http))

    for index in ("IPCA", "IPCA-15", "IGP-M"):
        j = inflacao.get(index=index, period="10y")
        print(f"{index}: {len(j['series'])} meses ({j['start']}..{j['end']})")
        print(f" - media 5a : {j['avg_5y']}")
        print(f" - media 10a: {j['avg_10y']}")

    print("Focus IPCA 12m:", focus.get(horizon="12m")["annual"])

if __name__ == "__main__":
    main()
