import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from swift_demangler.SwiftDemanglerConfig import DecodingPolicy, SwiftDemanglerConfig

config = SwiftDemanglerConfig()

strict_config = SwiftDemanglerConfig()
strict_config.POLICY = DecodingPolicy.STRICT

EXAMPLE_SYMBOL = "$S13ExampleNumber6isEven6numberSbSi_tF"
