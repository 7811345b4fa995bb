from .codabar import Codabar
from .code11 import Code11
from .code128 import Code128, Control
from .code39 import Code39, full_ascii_table
from .code93 import Code93
from .ean import Ean8, Ean13, UpcA
from .encoding import BarcodeEncoding
from .plessey import Plessey
from .postnet import PostNet
from .two_of_five import Coop2of5, Interleaved2of5, Matrix2of5, Standard2of5
from .upc_supplemental import UpcSupplemental2, UpcSupplemental5
from .upce import UpcE, upca_to_upce, upce_to_upca
