"""🧱 Інфраструктурний шар: мережа, декодування, діагностика."""
