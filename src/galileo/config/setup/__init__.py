"""📦 Збирання платформного сервісу на етапі композиції."""
