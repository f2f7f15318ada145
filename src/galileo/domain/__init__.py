"""🏛️ Доменний шар: контракти та DTO без залежностей від інфраструктури."""
