"""Writing SBOM documents through registered serializers and storage backends."""