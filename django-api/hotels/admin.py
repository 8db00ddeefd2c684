from django.contrib import admin

from hotels.models import Address, Enrollment, Hotel, Room, Ticket, TicketType


class AddressInline(admin.StackedInline):
    model = Address
    extra = 0


class RoomInline(admin.TabularInline):
    model = Room
    extra = 1


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    list_display = ["name", "user", "cpf", "created_at"]
    search_fields = ["name", "cpf", "user__username"]
    inlines = [AddressInline]


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):
    list_display = ["name", "price", "is_remote", "includes_hotel"]
    list_filter = ["is_remote", "includes_hotel"]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["enrollment", "ticket_type", "status", "updated_at"]
    list_filter = ["status", "ticket_type"]


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = ["name", "image", "created_at"]
    search_fields = ["name"]
    inlines = [RoomInline]


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ["name", "hotel", "capacity"]
    list_filter = ["hotel"]
